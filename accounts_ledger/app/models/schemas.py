from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


def format_amount(value: Decimal) -> str:
    """Render a decimal in plain notation, e.g. ``1E+3`` becomes ``1000``."""
    return format(value, "f")


class AccountCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId", min_length=1)
    balance: Decimal = Field(..., ge=0, description="Opening balance")


class AccountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId")
    balance: Decimal
