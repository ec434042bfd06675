# apps/domains/results/services/export.py
from __future__ import annotations

from datetime import date
from urllib.parse import quote

from django.http import HttpResponse
from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADER = [
    "학번",
    "이름",
    "학년",
    "반",
    "번호",
    "지문제목",
    "카테고리",
    "세부카테고리",
    "난이도",
    "점수",
    "독해시간_초",
    "문제수",
    "제출일시",
]

COLUMN_WIDTHS = {
    "F": 30,
    "M": 20,
}


def build_results_workbook(results) -> Workbook:
    """
    results: select_related("student", "passage") 된 Result queryset
    (question_answers 개수는 annotate(question_count=...) 로 전달)
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "성적"

    ws.append(HEADER)

    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center")

    for col in range(1, len(HEADER) + 1):
        cell = ws.cell(row=1, column=col)
        cell.font = header_font
        cell.alignment = center
        letter = get_column_letter(col)
        ws.column_dimensions[letter].width = COLUMN_WIDTHS.get(letter, 12)

    ws.freeze_panes = "A2"

    for r in results:
        st = r.student
        p = r.passage
        submitted = timezone.localtime(r.submitted_at)
        ws.append([
            st.student_id,
            st.name,
            st.grade,
            st.class_no,
            st.number,
            p.title,
            p.category,
            p.subcategory,
            p.difficulty,
            r.score,
            r.reading_time,
            getattr(r, "question_count", 0),
            submitted.strftime("%Y-%m-%d %H:%M:%S"),
        ])

    return wb


def export_filename(today: date) -> str:
    return f"성적_{today.isoformat()}.xlsx"


def workbook_response(wb: Workbook, filename: str) -> HttpResponse:
    resp = HttpResponse(content_type=XLSX_CONTENT_TYPE)
    ascii_name = filename.encode("ascii", "ignore").decode() or "export.xlsx"
    resp["Content-Disposition"] = (
        f'attachment; filename="{ascii_name}"; '
        f"filename*=UTF-8''{quote(filename)}"
    )
    wb.save(resp)
    return resp
