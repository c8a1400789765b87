from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, field_validator
from typing import Optional, Union

# Rates reach the engine unconverted; it normalizes anything malformed to 0
RateInput = Optional[Union[StrictInt, StrictFloat, StrictBool, str]]


class MemberIn(BaseModel):
    id: str
    name: str
    free_cash: int = 0  # In cents

class ItemIn(BaseModel):
    id: str
    name: str
    unit_price: int = Field(ge=0)  # In cents
    quantity: int = Field(default=1, ge=1)

class AssignmentIn(BaseModel):
    item_id: str
    member_ids: list[str] = []

    @field_validator('member_ids')
    @classmethod
    def validate_unique_members(cls, v):
        if len(set(v)) != len(v):
            raise ValueError('member_ids must not contain duplicates')
        return v

class BillIn(BaseModel):
    title: Optional[str] = None
    items: list[ItemIn] = []
    assignments: list[AssignmentIn] = []
    platform_fee_percent: RateInput = None
    discount_percent: RateInput = None
    status: str = "pending"

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        valid_statuses = ['pending', 'paid']
        if v not in valid_statuses:
            raise ValueError(f'Status must be one of {valid_statuses}')
        return v

class SplitRequest(BaseModel):
    bill: BillIn
    members: list[MemberIn]

class PersonSplit(BaseModel):
    member_id: str
    member_name: str
    actual_cost: int
    platform_fee: int
    free_cash_used: int
    discount: int
    final_payable: int

    class Config:
        from_attributes = True

class SplitResponse(BaseModel):
    splits: list[PersonSplit]
    total_extracted: int
    total_final: int
    variance: int
    variance_status: str  # over_collected, short, balanced
    unassigned_item_ids: list[str]
    warnings: list[str] = []

class PaidBill(BaseModel):
    title: Optional[str] = None
    status: str = "paid"
    platform_fee_percent: float
    discount_percent: float
    items: list[ItemIn]
    assignments: list[AssignmentIn]
    splits: list[PersonSplit]
    total_extracted: int
    total_final: int
    variance: int
    unassigned_item_ids: list[str]
