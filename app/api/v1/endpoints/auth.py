"""Auth API: register, sign in, sign out, current user.

Tokens are stateless JWTs; sign_out only acknowledges (clients drop the token).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import get_auth_service_for_write, get_current_user
from app.application.dtos.user import UserResult
from app.application.use_cases.auth import AuthService
from app.core.limiter import limit_auth
from app.schemas.auth import (
    MeResponse,
    RegisterRequest,
    RegisterResponse,
    SignInRequest,
    SignInResponse,
    UserProfile,
)

router = APIRouter()


@router.post("", response_model=RegisterResponse, status_code=201)
@limit_auth
async def register(
    request: Request,
    body: RegisterRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service_for_write)],
):
    """Register with email and password. Duplicate email or username returns 409."""
    user = await auth_svc.register(
        email=body.email,
        password=body.password,
        display_name=body.display_name,
        username=body.username,
    )
    return RegisterResponse(user={"id": user.id, "email": user.email})


@router.post("/sign_in", response_model=SignInResponse)
@limit_auth
async def sign_in(
    request: Request,
    response: Response,
    body: SignInRequest,
    auth_svc: Annotated[AuthService, Depends(get_auth_service_for_write)],
):
    """Return the user and a JWT (body and Authorization header)."""
    user, token = await auth_svc.sign_in(body.email, body.password)
    response.headers["Authorization"] = f"Bearer {token}"
    return SignInResponse(user=UserProfile.from_result(user), access_token=token)


@router.delete("/sign_out", status_code=204)
async def sign_out() -> Response:
    return Response(status_code=204)


@router.get("/me", response_model=MeResponse)
async def me(current_user: Annotated[UserResult, Depends(get_current_user)]):
    return MeResponse(user=UserProfile.from_result(current_user))
