"""
Authentication Use Cases

Registration, login, logout and session verification.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_session_use_case import AuthenticateSessionUseCase
from .dtos import RegisterCommand, LoginResponse, LogoutResponse

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateSessionUseCase",
    # DTOs
    "RegisterCommand",
    "LoginResponse",
    "LogoutResponse",
]
