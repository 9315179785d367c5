from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.core.exceptions import UserInsertException
from app.schemas import UserCreateRequest, UserCreateResponse
from app.services.user_service import create_user

router = APIRouter()


@router.post("/create", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED,
             description="Insert a user through the insert_user database function", summary="Create user")
async def create_user_endpoint(request: UserCreateRequest, session: AsyncSession = Depends(get_db_session)):
    result = await create_user(session, request.to_insert_args())

    if not result.is_success:
        raise UserInsertException()

    return UserCreateResponse(is_success=True, detail="User created", result=jsonable_encoder(result.value))
