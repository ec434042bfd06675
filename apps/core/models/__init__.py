from .user import User, Role

__all__ = [
    "User",
    "Role",
]
