"""Benefit grant use cases."""

from aevium.application.usecase.grant.create_grant import (
    CreateGrantRequest,
    CreateGrantUseCase,
    GrantResponse,
)
from aevium.application.usecase.grant.get_grant import (
    GetGrantRequest,
    GetGrantUseCase,
)

__all__ = [
    "CreateGrantRequest",
    "CreateGrantUseCase",
    "GetGrantRequest",
    "GetGrantUseCase",
    "GrantResponse",
]
