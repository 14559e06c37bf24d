"""Strongly typed identifiers.

Grant identifiers are opaque strings issued by the benefit ledger.
"""

from typing import NewType

GrantId = NewType("GrantId", str)
