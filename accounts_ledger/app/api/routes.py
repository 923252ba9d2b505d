from decimal import Decimal

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from ..core.dependencies import get_ledger_service
from ..core.errors import AccountNotFoundError
from ..models import Account, AccountCreate, AccountResponse
from ..services import LedgerService
from .responses import DecimalJSONResponse


router = APIRouter(prefix="/v1/accounts", tags=["accounts"])

@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.create_account(Account(account_id=payload.account_id, balance=payload.balance))
    return Response(status_code=status.HTTP_201_CREATED)

@router.post(
    "/transfer/{from_id}/{to_id}",
    status_code=status.HTTP_202_ACCEPTED,
    response_class=Response,
)
def transfer_amount(
    from_id: str,
    to_id: str,
    amount: Decimal = Body(...),
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.transfer(from_id, to_id, amount)
    return Response(status_code=status.HTTP_202_ACCEPTED)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> DecimalJSONResponse:
    try:
        account = service.get_account(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    payload = AccountResponse(account_id=account.account_id, balance=account.balance)
    return DecimalJSONResponse(content=payload.model_dump(by_alias=True))

__all__ = ["router"]
