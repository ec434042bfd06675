from rest_framework.routers import SimpleRouter
from .views import StudentViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"students", StudentViewSet, basename="teacher-students")

teacher_urlpatterns = router.urls
