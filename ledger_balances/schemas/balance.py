"""Balance schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class Balance(BaseModel):
    """One currency balance of an account; native entries carry no counterparty."""

    model_config = {"frozen": True}

    value: str = Field(description="Signed decimal string")
    currency: str
    counterparty: Optional[str] = None


class BalanceResponse(BaseModel):
    """Ordered balance report, native currency first when included."""

    balances: list[Balance]
