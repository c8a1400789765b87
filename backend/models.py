"""Domain models consumed and produced by the split engine.

All money values are integer cents. Percentages stay as whatever the caller
supplied and are normalized by utils.money.parse_percent.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

Rate = Union[int, float, str, None]


class BillStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    free_cash: int = 0  # credit balance in cents


@dataclass(frozen=True)
class Item:
    id: str
    name: str
    unit_price: int  # In cents
    quantity: int = 1

    @property
    def extended_price(self) -> int:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Assignment:
    item_id: str
    member_ids: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class Bill:
    items: tuple = ()
    assignments: tuple = ()
    platform_fee_percent: Rate = None
    discount_percent: Rate = None
    status: BillStatus = BillStatus.PENDING
    title: Optional[str] = None


@dataclass(frozen=True)
class PersonSplit:
    member_id: str
    member_name: str
    actual_cost: int
    platform_fee: int
    free_cash_used: int
    discount: int
    final_payable: int


@dataclass(frozen=True)
class Allocation:
    costs: dict  # member_id -> cents
    unassigned_item_ids: tuple


def variance_status(variance: int) -> str:
    if variance > 0:
        return "over_collected"
    if variance < 0:
        return "short"
    return "balanced"


@dataclass(frozen=True)
class Reconciliation:
    total_extracted: int
    total_final: int
    variance: int
    unassigned_item_ids: tuple

    @property
    def status(self) -> str:
        return variance_status(self.variance)


@dataclass(frozen=True)
class SplitResult:
    splits: tuple
    total_extracted: int
    total_final: int
    variance: int
    unassigned_item_ids: tuple
    # Rates after normalization, as applied to every split
    platform_fee_percent: Decimal = Decimal("0")
    discount_percent: Decimal = Decimal("0")

    @property
    def status(self) -> str:
        return variance_status(self.variance)
