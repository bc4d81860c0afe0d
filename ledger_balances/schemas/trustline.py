"""Trustline schemas as produced by the account_lines collaborator."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class TrustlineSpecification(BaseModel):
    """Settings the account itself controls on the trustline."""

    model_config = {"frozen": True}

    limit: str
    currency: str
    counterparty: Optional[str] = None
    quality_in: Optional[Decimal] = None
    quality_out: Optional[Decimal] = None
    rippling_disabled: Optional[bool] = None
    authorized: Optional[bool] = None
    frozen: Optional[bool] = None


class TrustlineCounterpartyState(BaseModel):
    """Settings the issuer side controls on the trustline."""

    model_config = {"frozen": True}

    limit: str
    rippling_disabled: Optional[bool] = None
    frozen: Optional[bool] = None
    authorized: Optional[bool] = None


class TrustlineState(BaseModel):
    model_config = {"frozen": True}

    balance: str


class TrustlineRecord(BaseModel):
    """Formatted trustline of an account."""

    model_config = {"frozen": True}

    specification: TrustlineSpecification
    counterparty: Optional[TrustlineCounterpartyState] = None
    state: TrustlineState
