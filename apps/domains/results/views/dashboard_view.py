# PATH: apps/domains/results/views/dashboard_view.py
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.context import TeacherContextMixin
from apps.core.permissions import IsTeacher
from apps.domains.results.aggregations.dashboard import (
    build_dashboard_stats,
    build_recent_activities,
)
from apps.domains.results.aggregations.statistics import build_statistics

RECENT_ACTIVITY_LIMIT_MAX = 50


class StatisticsView(TeacherContextMixin, APIView):
    """GET /api/teacher/statistics"""
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        return Response(build_statistics(self.ctx))


class DashboardStatsView(TeacherContextMixin, APIView):
    """GET /api/teacher/stats"""
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        return Response(build_dashboard_stats())


class RecentActivitiesView(TeacherContextMixin, APIView):
    """GET /api/teacher/recent-activities?limit=10"""
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        raw = request.query_params.get("limit") or "10"
        try:
            limit = int(raw)
        except ValueError:
            raise ValidationError({"limit": "숫자여야 합니다."})
        limit = max(1, min(limit, RECENT_ACTIVITY_LIMIT_MAX))
        return Response({"activities": build_recent_activities(self.ctx, limit)})
