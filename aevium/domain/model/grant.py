"""Benefit grant entity.

Partners provide education benefits to subscribed learners by creating grants.
A grant identifies a recipient, establishes the grant period, and defines the
level of benefits received. Describing benefits as a program and a level keeps
the underlying account information (subscription tier, balance) private.
"""

from datetime import datetime

from aevium.domain.model.common import DomainModel
from aevium.domain.value import GrantId


class BenefitGrantRequest(DomainModel):
    """A grant to be sent to the benefit ledger.

    The ledger truncates both period bounds to the day. Grants should not
    overlap within a program.
    """

    learner_key: str
    date_period_start: datetime
    date_period_end: datetime
    program: str
    level: str


class BenefitGrant(DomainModel):
    """A grant recorded by the benefit ledger."""

    uid: GrantId
    amount: float
    date_period_start: datetime
    date_period_end: datetime
