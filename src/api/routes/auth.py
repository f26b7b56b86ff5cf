from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_current_user, get_unit_of_work, session_cookie
from src.domain.entities import UserPublic

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    username: str = Field(..., min_length=3, max_length=255, description="Login name")
    password: str = Field(..., min_length=8, description="Password (min 8 chars)")
    email: Optional[str] = Field(None, description="Contact email")
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserEnvelope(BaseModel):
    user: UserPublic


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserEnvelope)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register a new user.

    Raises:
        - 409 Conflict: Username already exists
        - 400 Bad Request: Invalid input
    """
    command = RegisterCommand(**request.model_dump())
    result = await RegisterUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error, {"USERNAME_TAKEN": status.HTTP_409_CONFLICT})

    return {"user": result.value}


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log in with username and password.

    On success the session token is set as an HTTP-only cookie and also
    returned in the body for non-browser clients.

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown user or wrong password)
    """
    result = await LoginUseCase(uow).execute(request.username, request.password)

    if result.is_err():
        raise_for_error(
            result.error, {"INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED}
        )

    data = result.value
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=data.session_token,
        expires=data.expires_at,
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return data


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    response: Response,
    current_user: UserPublic = Depends(get_current_user),
    session_token: Optional[str] = Depends(session_cookie),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete the caller's session and clear the cookie"""
    if session_token:
        await LogoutUseCase(uow).execute(session_token)
    response.delete_cookie(ApplicationConfig.SESSION_COOKIE_NAME)
    return LogoutResponse(success=True, message="Logged out successfully")


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserEnvelope)
async def me(current_user: UserPublic = Depends(get_current_user)):
    """Current user, without any credential material"""
    return {"user": current_user}
