# PATH: apps/domains/students/management/commands/seed_reading_demo.py
"""
로컬 개발용 데모 데이터

- 교사 teacher001 / password123
- 학생 student001 / password123 (학번 030101, 3학년 1반 1번)
- 지문 1개 + 지문 문제 2개 + 문법 문제 1개 + 자습용 시험지 1개

이미 있으면 건너뛴다.

사용:
  python manage.py seed_reading_demo
  python manage.py seed_reading_demo --password=secret
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.models import Role
from apps.domains.exams.models import Exam
from apps.domains.passages.models import Passage
from apps.domains.questions.models import Question
from apps.domains.students.models import Student
from apps.domains.students.services.accounts import create_student_with_user
from apps.domains.teachers.models import Teacher

DEMO_PASSAGE = {
    "title": "광합성의 원리",
    "category": "비문학",
    "subcategory": "과학",
    "difficulty": "고1-2",
    "content_blocks": [
        {
            "para": "식물은 빛 에너지를 이용해 이산화탄소와 물로 포도당을 만든다.",
            "q": "이 문단의 중심 내용은?",
            "a": "식물은 빛으로 포도당을 만든다",
            "explanation": "광합성의 정의를 설명하는 문단이다.",
        },
        {
            "para": "이 과정에서 산소가 부산물로 방출된다.",
            "q": "광합성의 부산물은?",
            "a": "산소",
            "explanation": "",
        },
    ],
}


class Command(BaseCommand):
    help = "데모용 교사 / 학생 계정과 샘플 지문, 문제, 시험지를 만든다."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            type=str,
            default="password123",
            help="교사 / 학생 공통 비밀번호 (기본: password123)",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        password = options["password"]
        User = get_user_model()

        # 1) 교사
        if Teacher.objects.filter(teacher_id="teacher001").exists():
            self.stdout.write("teacher001 already exists, skip")
        else:
            user = User.objects.create_user(
                username="teacher001",
                password=password,
                name="김선생",
                role=Role.TEACHER,
            )
            Teacher.objects.create(user=user, teacher_id="teacher001", name="김선생")
            self.stdout.write(self.style.SUCCESS("teacher created: teacher001"))

        # 2) 학생
        if Student.objects.filter(student_id="030101").exists():
            self.stdout.write("student 030101 already exists, skip")
        else:
            create_student_with_user({
                "user_id": "student001",
                "password": password,
                "name": "홍길동",
                "school_level": "고등",
                "grade": 3,
                "class_no": 1,
                "number": 1,
            })
            self.stdout.write(self.style.SUCCESS("student created: student001 (030101)"))

        # 3) 지문 / 문제
        if Passage.objects.filter(title=DEMO_PASSAGE["title"]).exists():
            self.stdout.write("demo passage already exists, skip")
        else:
            passage = Passage.objects.create(**DEMO_PASSAGE)
            Question.objects.create(
                passage=passage,
                type=Question.Type.MULTIPLE_CHOICE,
                text="광합성에 필요한 에너지는?",
                options=["열", "빛", "소리", "바람"],
                answers=["빛"],
                explanation="식물은 빛 에너지를 이용한다.",
            )
            Question.objects.create(
                passage=passage,
                type=Question.Type.SHORT_ANSWER,
                text="광합성으로 만들어지는 당의 이름은?",
                answers=["포도당"],
                explanation="",
            )
            Question.objects.create(
                passage=None,
                type=Question.Type.SHORT_ANSWER,
                text="'먹다'의 높임말은?",
                answers=["드시다", "잡수시다"],
                explanation="'드시다', '잡수시다' 모두 정답이다.",
            )
            self.stdout.write(self.style.SUCCESS(f"passage created: {passage.title}"))

        # 4) 시험지
        if not Exam.objects.filter(title="데모 자습 시험지").exists():
            Exam.objects.create(
                title="데모 자습 시험지",
                category=Exam.Category.NON_LITERATURE,
                target_school="고등",
                target_grade=3,
                exam_type=Exam.ExamType.SELF_STUDY,
                is_public=True,
                items=[
                    {
                        "passage": DEMO_PASSAGE["content_blocks"][0]["para"],
                        "questions": [
                            {
                                "text": "광합성에 필요한 에너지는?",
                                "type": Question.Type.MULTIPLE_CHOICE,
                                "options": ["열", "빛", "소리"],
                                "answers": ["빛"],
                                "explanation": "",
                            },
                            {
                                "text": "광합성으로 만들어지는 당은?",
                                "type": Question.Type.SHORT_ANSWER,
                                "options": [],
                                "answers": ["포도당"],
                                "explanation": "",
                            },
                        ],
                    },
                ],
            )
            self.stdout.write(self.style.SUCCESS("exam created: 데모 자습 시험지"))

        self.stdout.write(self.style.SUCCESS("seed completed"))
