# PATH: apps/api/common/numbers.py
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value, digits: int = 0):
    """
    사사오입 반올림 (Python round()는 banker's rounding)
    - digits=0 이면 int 반환
    """
    quant = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def ratio_percent(correct: int, total: int) -> int:
    """정답 비율(%) 정수. total=0 이면 0."""
    if not total:
        return 0
    return round_half_up(correct / total * 100)
