"""Create grant use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel, Field

from aevium.application.usecase.base import BaseUseCase
from aevium.config import LedgerSettings
from aevium.domain.service import GrantService
from aevium.domain.value import GrantId
from aevium.util.clock import Clock


class CreateGrantRequest(BaseModel):
    """Create grant request.

    Program and level fall back to the configured defaults; the period starts
    now unless given.
    """

    learner_key: str
    program: str | None = None
    level: str | None = None
    date_period_start: datetime | None = None
    duration_days: int = Field(default=30, ge=1)


class GrantResponse(BaseModel):
    """Benefit grant as returned to callers."""

    uid: GrantId
    amount: float
    date_period_start: datetime
    date_period_end: datetime


class CreateGrantUseCase(BaseUseCase):
    """Use case for granting benefits to a subscribed learner."""

    def __init__(
        self, grant_service: GrantService, ledger_settings: LedgerSettings, clock: Clock
    ) -> None:
        """Initialize create grant use case.

        Args:
            grant_service: Grant domain service
            ledger_settings: Default program and level
            clock: Time source for the default period start
        """
        self.grant_service = grant_service
        self.ledger_settings = ledger_settings
        self.clock = clock

    async def execute(self, request: CreateGrantRequest) -> GrantResponse:
        """Create a grant covering ``duration_days`` from the period start.

        Raises:
            ValidationError: If program or level cannot be determined
        """
        program = request.program or self.ledger_settings.default_program or ""
        level = request.level or self.ledger_settings.default_program_level or ""
        start = request.date_period_start or self.clock.now()
        end = start + timedelta(days=request.duration_days)

        with logfire.span("create_grant.execute", program=program, level=level):
            grant = await self.grant_service.create_grant(
                request.learner_key, start, end, program, level
            )
            return GrantResponse(**grant.model_dump())
