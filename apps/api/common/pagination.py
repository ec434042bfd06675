# PATH: apps/api/common/pagination.py
from django.conf import settings

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class TeacherListPagination(PageNumberPagination):
    """
    교사 목록 API 공통 페이지네이션
    - ?page=1&limit=10
    - 응답: {results, pagination: {page, limit, total, total_pages}}
    """
    page_size = settings.READING_PAGE_SIZE_DEFAULT
    page_size_query_param = "limit"
    max_page_size = settings.READING_PAGE_SIZE_MAX

    def get_paginated_response(self, data):
        return Response({
            "results": data,
            "pagination": {
                "page": self.page.number,
                "limit": self.page.paginator.per_page,
                "total": self.page.paginator.count,
                "total_pages": self.page.paginator.num_pages,
            },
        })
