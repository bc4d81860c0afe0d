"""Balance endpoints."""

from fastapi import APIRouter, Depends

from ledger_balances.api.deps import get_account_address, get_balance_options, get_balance_service
from ledger_balances.schemas.balance import BalanceResponse
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.services.balance_service import BalanceService

router = APIRouter(prefix="/accounts", tags=["balances"])


@router.get("/{address}/balances", response_model=BalanceResponse, response_model_exclude_none=True)
async def list_balances(
    address: str = Depends(get_account_address),
    options: BalanceOptions = Depends(get_balance_options),
    service: BalanceService = Depends(get_balance_service),
) -> BalanceResponse:
    """Return native and trustline balances observed at one ledger version."""

    balances = await service.get_balances(address, options)
    return BalanceResponse(balances=balances)
