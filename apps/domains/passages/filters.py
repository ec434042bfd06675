import django_filters

from .models import Passage


class PassageFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name="title", lookup_expr="icontains")
    category = django_filters.CharFilter(field_name="category")
    subcategory = django_filters.CharFilter(field_name="subcategory")
    difficulty = django_filters.CharFilter(field_name="difficulty")

    class Meta:
        model = Passage
        fields = ["search", "category", "subcategory", "difficulty"]
