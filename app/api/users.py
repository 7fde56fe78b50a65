from fastapi import APIRouter, Depends, status

from app.core.exceptions import MissingRegistrationFieldsException, UserAlreadyExistsException
from app.dependencies.service_dependencies import get_user_service
from app.schemas.user import ErrorResponse, RegisterRequest, RegisteredUserResponse
from app.services.user_service import UserService

router = APIRouter(tags=["users"])

@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisteredUserResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def register(
    request: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user.
    """
    if not request.has_required_fields():
        raise MissingRegistrationFieldsException()

    result = await user_service.register(request.username, request.email, request.password)
    if result.is_err:
        raise UserAlreadyExistsException(detail=result.error.message)

    user = result.value
    return RegisteredUserResponse(id=user.id, username=user.username, email=user.email)
