import django_filters

from .models import Exam


class ExamFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="title", lookup_expr="icontains")
    category = django_filters.CharFilter(field_name="category")
    target_grade = django_filters.NumberFilter(field_name="target_grade")

    class Meta:
        model = Exam
        fields = ["search", "category", "target_grade"]
