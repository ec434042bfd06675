# PATH: apps/domains/students/services/accounts.py
# 학생 계정(User + Student) 생성 / 수정 / 삭제

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from rest_framework.exceptions import ValidationError

from apps.core.models import Role
from ..models import Student

logger = logging.getLogger(__name__)


def build_student_id(grade, class_no, number) -> str:
    """학번 GGCCNN (예: 3학년 2반 1번 → 030201)"""
    return f"{int(grade):02d}{int(class_no):02d}{int(number):02d}"


@transaction.atomic
def create_student_with_user(data: dict) -> Student:
    """
    User + Student 동시 생성
    - 학번 중복이면 400
    - 로그인 아이디(user_id)가 없으면 학번을 그대로 사용
    """
    grade = data["grade"]
    class_no = data["class_no"]
    number = data["number"]
    student_id = build_student_id(grade, class_no, number)

    if Student.objects.filter(student_id=student_id).exists():
        raise ValidationError(
            {"student_id": f"이미 등록된 학번입니다: {grade}학년 {class_no}반 {number}번"}
        )

    User = get_user_model()
    username = (data.get("user_id") or "").strip() or student_id
    if User.objects.filter(username=username).exists():
        raise ValidationError({"user_id": "이미 사용 중인 로그인 아이디입니다."})

    user = User.objects.create_user(
        username=username,
        password=data["password"],
        name=data["name"],
        role=Role.STUDENT,
    )

    student = Student.objects.create(
        user=user,
        student_id=student_id,
        name=data["name"],
        school_level=data.get("school_level") or "고등",
        grade=grade,
        class_no=class_no,
        number=number,
        is_active=data.get("is_active", True),
        activation_start_date=data.get("activation_start_date"),
        activation_end_date=data.get("activation_end_date"),
    )

    logger.info("student created id=%s student_id=%s", student.id, student_id)
    return student


@transaction.atomic
def update_student_profile(student: Student, data: dict) -> Student:
    """
    학번 / 학년 / 반 / 번호는 변경하지 않는다.
    비밀번호는 값이 있을 때만 교체.
    """
    user = student.user
    user.name = data["name"]
    password = data.get("password")
    if password:
        user.set_password(password)
    user.save()

    student.name = data["name"]
    student.school_level = data["school_level"]
    if "is_active" in data:
        student.is_active = data["is_active"]
    student.activation_start_date = data.get("activation_start_date")
    student.activation_end_date = data.get("activation_end_date")
    student.save()

    logger.info("student updated id=%s", student.id)
    return student


@transaction.atomic
def delete_student_with_user(student: Student) -> None:
    """User 삭제 → Student 및 풀이 기록은 CASCADE"""
    student_pk = student.id
    student.user.delete()
    logger.info("student deleted id=%s", student_pk)
