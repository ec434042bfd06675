import django_filters
from rest_framework.exceptions import ValidationError

from .models import Question


class QuestionFilter(django_filters.FilterSet):
    """
    - search: 문제 본문 부분 일치 (대소문자 무시)
    - passage_id: 지문 id, "null" 이면 독립 문제만
    - type: 문제 유형
    """
    search = django_filters.CharFilter(field_name="text", lookup_expr="icontains")
    passage_id = django_filters.CharFilter(method="filter_passage_id")
    type = django_filters.CharFilter(field_name="type")

    class Meta:
        model = Question
        fields = ["search", "passage_id", "type"]

    def filter_passage_id(self, queryset, name, value):
        if value == "null":
            return queryset.filter(passage__isnull=True)
        try:
            return queryset.filter(passage_id=int(value))
        except ValueError:
            raise ValidationError({"passage_id": "passage_id 는 숫자 또는 null 이어야 합니다."})
