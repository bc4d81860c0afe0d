"""Balance query options."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_CURRENCY_RE = re.compile(r"^(?:[A-Za-z0-9?!@#$%^&*<>(){}\[\]|]{3}|[0-9A-Fa-f]{40})$")


class BalanceOptions(BaseModel):
    """Selection options for one balance query; immutable once built."""

    model_config = {"frozen": True}

    ledger_version: Optional[int] = Field(default=None, ge=1)
    counterparty: Optional[str] = None
    currency: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)

    @field_validator("counterparty")
    @classmethod
    def validate_counterparty(cls, value: Optional[str]) -> Optional[str]:
        from ledger_balances.ledger.addresses import is_valid_classic_address

        if value is not None and not is_valid_classic_address(value):
            raise ValueError("counterparty must be a classic account address")
        return value

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not _CURRENCY_RE.match(value):
            raise ValueError("currency must be a 3-character code or 40 hex characters")
        return value
