from .user_create_request import UserCreateRequest
from .user_create_response import UserCreateResponse

__all__ = ["UserCreateRequest", "UserCreateResponse"]
