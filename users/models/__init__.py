from .user import User, normalize_email

__all__ = ["User", "normalize_email"]
