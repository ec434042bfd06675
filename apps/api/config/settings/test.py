# PATH: apps/api/config/settings/test.py
from .base import *

DEBUG = False
SECRET_KEY = "test-secret-key-not-for-production-use-0123456789"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# 테스트 속도: bcrypt/pbkdf2 대신 md5
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LOGGING["loggers"]["apps"]["level"] = "WARNING"
