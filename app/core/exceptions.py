from fastapi import HTTPException, status

USER_INSERT_ERROR_MESSAGE = "Error insertando usuario"


class APIException(HTTPException):
    """Base class for custom API exceptions."""

    def __init__(self, detail: str, status_code: int):
        super().__init__(status_code=status_code, detail=detail)


class InternalServerErrorException(APIException):
    """Raised when an unexpected error occurs."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UserInsertException(InternalServerErrorException):
    """Raised when the insert_user call fails, whatever the cause."""

    def __init__(self):
        super().__init__(detail=USER_INSERT_ERROR_MESSAGE)
