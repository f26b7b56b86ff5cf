"""
API Key Use Cases
"""

from .create_api_key_use_case import CreateApiKeyUseCase
from .list_api_keys_use_case import ListApiKeysUseCase
from .verify_api_key_use_case import VerifyApiKeyUseCase
from .manage_api_key_use_case import ManageApiKeyUseCase
from .dtos import CreateApiKeyCommand, VerifiedApiKey

__all__ = [
    "CreateApiKeyUseCase",
    "ListApiKeysUseCase",
    "VerifyApiKeyUseCase",
    "ManageApiKeyUseCase",
    "CreateApiKeyCommand",
    "VerifiedApiKey",
]
