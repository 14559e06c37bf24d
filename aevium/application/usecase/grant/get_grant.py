"""Get grant use case."""

import logfire
from pydantic import BaseModel

from aevium.application.usecase.base import BaseUseCase
from aevium.application.usecase.grant.create_grant import GrantResponse
from aevium.domain.service import GrantService
from aevium.domain.value import GrantId


class GetGrantRequest(BaseModel):
    """Get grant request."""

    uid: str


class GetGrantUseCase(BaseUseCase):
    """Use case for confirming receipt of a grant."""

    def __init__(self, grant_service: GrantService) -> None:
        self.grant_service = grant_service

    async def execute(self, request: GetGrantRequest) -> GrantResponse:
        with logfire.span("get_grant.execute", grant_uid=request.uid):
            grant = await self.grant_service.get_grant(GrantId(request.uid))
            return GrantResponse(**grant.model_dump())
