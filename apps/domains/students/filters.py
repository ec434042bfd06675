import django_filters
from .models import Student


class StudentFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    school_level = django_filters.CharFilter()
    grade = django_filters.NumberFilter()
    class_no = django_filters.NumberFilter()
    is_active = django_filters.BooleanFilter()

    class Meta:
        model = Student
        fields = [
            "name",
            "school_level",
            "grade",
            "class_no",
            "is_active",
        ]
