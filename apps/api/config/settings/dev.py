# PATH: apps/api/config/settings/dev.py
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 🔴 base 설정 유지 + 브라우저 확인용 세션 인증만 추가
REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"] = [
    "rest_framework_simplejwt.authentication.JWTAuthentication",
    "apps.core.authentication.CsrfExemptSessionAuthentication",
]

LOGGING["loggers"]["apps"]["level"] = "DEBUG"
