from .user_service import InsertUserResult, create_user

__all__ = ["InsertUserResult", "create_user"]
