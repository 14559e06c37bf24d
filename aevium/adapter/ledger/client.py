"""Benefit ledger HTTP client.

Grants are sent to the partner API with bearer-token authentication:

    POST {base_url}/api/partner/v1/benefit-grants
    GET  {base_url}/api/partner/v1/benefit-grants/{uid}
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from aevium.adapter.error import LedgerError, LedgerResponseError
from aevium.domain.error import NotFoundError
from aevium.domain.model.grant import BenefitGrant, BenefitGrantRequest
from aevium.domain.service.grant_service import BenefitLedgerClient
from aevium.domain.value import GrantId

API_PATH = "/api/partner/v1"


def _isoformat(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with millisecond precision and Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RealBenefitLedgerClient(BenefitLedgerClient):
    """Benefit ledger client over HTTPS."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize benefit ledger client.

        Args:
            base_url: Aevium environment URL, without a trailing slash
            api_key: Partner API key sent as a bearer token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.api_root = f"{base_url}{API_PATH}"
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def create_grant(self, request: BenefitGrantRequest) -> BenefitGrant:
        """Send a grant to the ledger.

        Raises:
            LedgerResponseError: If the ledger rejects the grant
            LedgerError: If the ledger cannot be reached
        """
        body = {
            "learnerKey": request.learner_key,
            "datePeriodStart": _isoformat(request.date_period_start),
            "datePeriodEnd": _isoformat(request.date_period_end),
            "program": request.program,
            "level": request.level,
        }
        data = await self._request("POST", "/benefit-grants", json=body)
        return self._to_grant(data)

    async def get_grant(self, uid: GrantId) -> BenefitGrant:
        """Fetch a grant by its identifier.

        Raises:
            LedgerResponseError: If the ledger answers with an error status
            LedgerError: If the ledger cannot be reached
        """
        data = await self._request("GET", f"/benefit-grants/{uid}")
        return self._to_grant(data)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.api_root}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method, url, headers=self._headers, **kwargs
                )
        except httpx.HTTPError as e:
            logfire.error("Benefit ledger HTTP error", path=path, error=str(e))
            raise LedgerError(f"HTTP error calling benefit ledger: {e}")

        if not response.is_success:
            error = self._error_body(response)
            logfire.error(
                "Benefit ledger request failed",
                path=path,
                status_code=response.status_code,
                error=error,
            )
            raise LedgerResponseError(response.status_code, error)

        try:
            return response.json()
        except ValueError as e:
            raise LedgerError(f"Benefit ledger returned invalid JSON: {e}")

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _to_grant(data: Any) -> BenefitGrant:
        try:
            return BenefitGrant(
                uid=GrantId(data["uid"]),
                amount=data["amount"],
                date_period_start=data["datePeriodStart"],
                date_period_end=data["datePeriodEnd"],
            )
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise LedgerError(f"Unexpected benefit ledger response: {e}")


class MockBenefitLedgerClient(BenefitLedgerClient):
    """Mock benefit ledger for testing.

    Records grants in memory without making real API calls.
    """

    def __init__(self, amount: float = 1.0) -> None:
        self.amount = amount
        self.grants: dict[GrantId, BenefitGrant] = {}
        self.requests: list[BenefitGrantRequest] = []

    async def create_grant(self, request: BenefitGrantRequest) -> BenefitGrant:
        """Record the grant and return it with a fresh uid."""
        self.requests.append(request)
        grant = BenefitGrant(
            uid=GrantId(uuid4().hex),
            amount=self.amount,
            date_period_start=request.date_period_start,
            date_period_end=request.date_period_end,
        )
        self.grants[grant.uid] = grant
        return grant

    async def get_grant(self, uid: GrantId) -> BenefitGrant:
        """Return a recorded grant.

        Raises:
            NotFoundError: If no grant has that uid
        """
        grant = self.grants.get(uid)
        if grant is None:
            raise NotFoundError("Grant", uid)
        return grant
