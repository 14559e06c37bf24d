"""Benefit grant domain service."""

from abc import ABC, abstractmethod
from datetime import datetime

import logfire
from pydantic import ValidationError as PydanticValidationError

from aevium.domain.error import ValidationError
from aevium.domain.model.grant import BenefitGrant, BenefitGrantRequest
from aevium.domain.value import GrantId, LearnerKey

from .base import Service


class BenefitLedgerClient(ABC):
    """Client for the benefit ledger service.

    The ledger assumes a learner no longer receives benefits through the
    partner once grants stop arriving.
    """

    @abstractmethod
    async def create_grant(self, request: BenefitGrantRequest) -> BenefitGrant:
        """Send a grant to the ledger.

        Args:
            request: Grant to create

        Returns:
            Grant as recorded by the ledger
        """
        pass

    @abstractmethod
    async def get_grant(self, uid: GrantId) -> BenefitGrant:
        """Fetch a grant by its identifier.

        Args:
            uid: Grant identifier assigned by the ledger

        Returns:
            The grant
        """
        pass


class GrantService(Service):
    """Domain service for benefit grant operations."""

    def __init__(self, ledger_client: BenefitLedgerClient) -> None:
        """Initialize grant service.

        Args:
            ledger_client: Benefit ledger client
        """
        self.ledger_client = ledger_client

    async def create_grant(
        self,
        learner_key: str,
        date_period_start: datetime,
        date_period_end: datetime,
        program: str,
        level: str,
    ) -> BenefitGrant:
        """Create a benefit grant for a subscribed learner.

        Args:
            learner_key: Opaque learner identifier
            date_period_start: Start of the covered period
            date_period_end: End of the covered period
            program: Program under which benefits are given
            level: Program level that determines the benefits

        Returns:
            Created grant

        Raises:
            ValidationError: If the grant is incomplete or its period is empty
        """
        with logfire.span(
            "grant_service.create_grant", program=program, level=level
        ):
            try:
                LearnerKey(learner_key)
            except PydanticValidationError as e:
                raise ValidationError(str(e))
            if not program or not level:
                raise ValidationError("Program and level are required")
            if date_period_end <= date_period_start:
                raise ValidationError("Grant period must end after it starts")

            request = BenefitGrantRequest(
                learner_key=learner_key,
                date_period_start=date_period_start,
                date_period_end=date_period_end,
                program=program,
                level=level,
            )
            grant = await self.ledger_client.create_grant(request)
            logfire.info("Grant created", grant_uid=grant.uid, program=program)
            return grant

    async def get_grant(self, uid: GrantId) -> BenefitGrant:
        """Fetch a grant to confirm its receipt.

        Args:
            uid: Grant identifier

        Returns:
            The grant
        """
        with logfire.span("grant_service.get_grant", grant_uid=uid):
            if not uid:
                raise ValidationError("Grant uid is required")
            grant = await self.ledger_client.get_grant(uid)
            logfire.info("Grant fetched", grant_uid=grant.uid)
            return grant
