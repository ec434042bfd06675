import pytest

from apps.core.context import require_role
from apps.core.models import Role
from apps.domains.results.models import Result
from apps.domains.results.services.ranking import assign_ranks, build_ranking


def _row(id, average_score, total_results):
    return {
        "id": id,
        "name": f"s{id}",
        "grade": 3,
        "class_no": 1,
        "number": id,
        "average_score": average_score,
        "total_results": total_results,
    }


class TestAssignRanks:
    def test_ties_share_rank_and_next_rank_skips(self):
        ranked = assign_ranks([_row(3, 80.0, 1), _row(2, 90.0, 1), _row(1, 90.0, 2)])

        assert [r.id for r in ranked] == [1, 2, 3]
        assert [r.rank for r in ranked] == [1, 1, 3]

    def test_empty(self):
        assert assign_ranks([]) == []


@pytest.mark.django_db
class TestBuildRanking:
    @pytest.fixture
    def classroom(self, make_student, make_passage):
        passage = make_passage()
        a = make_student(number=1, name="A", user_id="a")
        b = make_student(number=2, name="B", user_id="b")
        c = make_student(number=3, name="C", user_id="c")
        idle = make_student(number=4, name="D", user_id="d")
        for student, scores in ((a, [90, 90]), (b, [90]), (c, [80])):
            for score in scores:
                Result.objects.create(student=student, passage=passage, score=score)
        return a, b, c, idle

    def test_class_ranking(self, classroom):
        a, b, c, idle = classroom

        out = build_ranking(require_role(b.user, Role.STUDENT), "class")

        assert out["type"] == "class"
        assert out["total_students"] == 3
        assert [(r["number"], r["rank"]) for r in out["top5"]] == [(1, 1), (2, 1), (3, 3)]
        assert [r["is_me"] for r in out["top5"]] == [False, True, False]
        assert "name" not in out["top5"][0]
        assert out["my_rank"] == {
            "rank": 1,
            "name": "B",
            "grade": 3,
            "class_no": 1,
            "number": 2,
            "average_score": 90.0,
            "total_results": 1,
        }

    def test_zero_attempt_student_is_excluded(self, classroom):
        *_, idle = classroom

        out = build_ranking(require_role(idle.user, Role.STUDENT), "all")

        assert out["my_rank"] is None
        assert all(not r["is_me"] for r in out["top5"])

    def test_inactive_students_are_excluded(self, classroom):
        a, b, c, idle = classroom
        a.is_active = False
        a.save()

        out = build_ranking(require_role(b.user, Role.STUDENT), "grade")

        assert [r["number"] for r in out["top5"]] == [2, 3]
        assert out["my_rank"]["rank"] == 1

    def test_api_rejects_unknown_type(self, classroom, api_client):
        a, *_ = classroom
        api_client.force_authenticate(user=a.user)

        assert api_client.get("/api/student/ranking").data["type"] == "class"
        res = api_client.get("/api/student/ranking", {"type": "school"})
        assert res.status_code == 400
