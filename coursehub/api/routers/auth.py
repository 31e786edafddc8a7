"""
Account API endpoints.

Routes: POST /auth/signup - Student self-registration

Sign-in and session issuance belong to the auth gateway.

Dependencies: coursehub.application.services, coursehub.models
System role: Account HTTP API
"""

from fastapi import APIRouter, Depends

from coursehub.api.deps import get_user_service
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import UserService
from coursehub.models.user import SignupRequest, SignupResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
@handle_service_errors
async def signup(
    request: SignupRequest,
    user_service: UserService = Depends(get_user_service),
) -> SignupResponse:
    """
    Create a STUDENT account.

    Raises:
        HTTPException(409): Email already registered
        HTTPException(422): Name, email or password invalid
    """
    user = await user_service.signup(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return SignupResponse(user=UserResponse(**user))
