"""Split calculation for itemized bills."""

from models import Bill, Member, SplitResult
from utils.allocation import allocate
from utils.fees import apply
from utils.money import parse_percent
from utils.reconcile import reconcile
from utils.validation import validate_bill_structure


def compute_splits(bill: Bill, members: list[Member]) -> SplitResult:
    """
    Calculate what every member of the group pays for a bill.

    Algorithm:
    1. Validate ids and references
    2. Allocate item prices to assignees (shared items split equally)
    3. Apply platform fee, free cash and discount per member
    4. Reconcile the collected total against the invoice subtotal

    Every member gets a split, including members with nothing assigned.
    The bill and members are never mutated, so the result depends only on
    the inputs.
    """
    validate_bill_structure(bill, members)

    fee_percent = parse_percent(bill.platform_fee_percent, "platform fee percent")
    disc_percent = parse_percent(bill.discount_percent, "discount percent")

    allocation = allocate(bill.items, bill.assignments)

    splits = tuple(
        apply(
            allocation.costs.get(member.id, 0),
            member.free_cash,
            fee_percent,
            disc_percent,
            member_id=member.id,
            member_name=member.name,
        )
        for member in members
    )

    reconciliation = reconcile(bill.items, splits, allocation.unassigned_item_ids)

    return SplitResult(
        splits=splits,
        total_extracted=reconciliation.total_extracted,
        total_final=reconciliation.total_final,
        variance=reconciliation.variance,
        unassigned_item_ids=reconciliation.unassigned_item_ids,
        platform_fee_percent=fee_percent,
        discount_percent=disc_percent,
    )
