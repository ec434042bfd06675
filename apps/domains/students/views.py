# PATH: apps/domains/students/views.py

from rest_framework.viewsets import ModelViewSet
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status
from rest_framework.exceptions import NotFound

from django_filters.rest_framework import DjangoFilterBackend

from apps.core.context import TeacherContextMixin
from apps.core.permissions import IsTeacher

from .models import Student
from .filters import StudentFilter
from .serializers import (
    StudentListSerializer,
    StudentDetailSerializer,
    StudentCreateSerializer,
    StudentUpdateSerializer,
)
from .services import (
    create_student_with_user,
    update_student_profile,
    delete_student_with_user,
)


# ======================================================
# Student (교사 전용)
# ======================================================

class StudentViewSet(TeacherContextMixin, ModelViewSet):
    """
    학생 관리 ViewSet

    ✔ 학생 생성 시 User 계정 자동 생성 (트랜잭션)
    ✔ 학번 = 학년/반/번호 2자리씩 (GGCCNN)
    ✔ 학번 / 학년 / 반 / 번호 수정 불가
    ✔ 학생 삭제 시 User 삭제
    """

    permission_classes = [IsAuthenticated, IsTeacher]
    filter_backends = [DjangoFilterBackend]
    filterset_class = StudentFilter
    http_method_names = ["get", "post", "put", "delete"]
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        qs = Student.objects.select_related("user")
        return qs.order_by("grade", "class_no", "number")

    def get_object(self):
        student = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if student is None:
            raise NotFound("학생을 찾을 수 없습니다.")
        return student

    def get_serializer_class(self):
        if self.action == "retrieve":
            return StudentDetailSerializer
        if self.action == "create":
            return StudentCreateSerializer
        if self.action == "update":
            return StudentUpdateSerializer
        return StudentListSerializer

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())
        return Response({"students": StudentListSerializer(qs, many=True).data})

    def create(self, request, *args, **kwargs):
        serializer = StudentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        student = create_student_with_user(serializer.validated_data)
        return Response(
            {
                "message": "학생이 성공적으로 등록되었습니다.",
                "student": StudentListSerializer(student).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        student = self.get_object()
        serializer = StudentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        student = update_student_profile(student, serializer.validated_data)
        return Response({
            "message": "학생 정보가 성공적으로 수정되었습니다.",
            "student": StudentListSerializer(student).data,
        })

    def destroy(self, request, *args, **kwargs):
        student = self.get_object()
        delete_student_with_user(student)
        return Response({"message": "학생이 성공적으로 삭제되었습니다."})
