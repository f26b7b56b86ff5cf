from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.api_keys import (
    CreateApiKeyCommand,
    CreateApiKeyUseCase,
    ListApiKeysUseCase,
    ManageApiKeyUseCase,
    VerifiedApiKey,
)
from src.depends import get_current_user, get_unit_of_work, get_verified_api_key
from src.domain.entities import ApiKeyCreated, ApiKeyDisplay, UserPublic

router = APIRouter(tags=["API Keys"])


class CreateApiKeyRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name")


class ToggleApiKeyRequest(BaseModel):
    is_active: bool


@router.post("/api-keys", status_code=status.HTTP_201_CREATED, response_model=ApiKeyCreated)
async def create_api_key(
    request: CreateApiKeyRequest,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create an API key.

    The raw key is in this response only; store it now.
    """
    result = await CreateApiKeyUseCase(uow).execute(
        current_user.id, CreateApiKeyCommand(name=request.name)
    )
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get("/api-keys", status_code=status.HTTP_200_OK, response_model=List[ApiKeyDisplay])
async def list_api_keys(
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the caller's API keys, masked"""
    result = await ListApiKeysUseCase(uow).execute(current_user.id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.delete("/api-keys/{key_id}", status_code=status.HTTP_200_OK)
async def delete_api_key(
    key_id: str,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Key missing or owned by another user
    """
    result = await ManageApiKeyUseCase(uow).delete(key_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return {"success": True, "message": "API key deleted successfully"}


@router.put(
    "/api-keys/{key_id}/toggle", status_code=status.HTTP_200_OK, response_model=ApiKeyDisplay
)
async def toggle_api_key(
    key_id: str,
    request: ToggleApiKeyRequest,
    current_user: UserPublic = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Activate or deactivate a key. Deactivated keys stay listed.

    Raises:
        - 404 Not Found: Key missing or owned by another user
    """
    result = await ManageApiKeyUseCase(uow).set_active(
        key_id, request.is_active, current_user.id
    )
    if result.is_err():
        raise_for_error(result.error, {"NOT_FOUND": status.HTTP_404_NOT_FOUND})
    return result.value


@router.post("/verify-key", status_code=status.HTTP_200_OK)
async def verify_key(verified: VerifiedApiKey = Depends(get_verified_api_key)):
    """
    Check an API key sent in the X-API-Key header.

    Raises:
        - 401 Unauthorized: Missing, unknown or inactive key
    """
    return {
        "valid": True,
        "user": {"id": verified.user.id, "username": verified.user.username},
        "key_id": verified.api_key.id,
    }
