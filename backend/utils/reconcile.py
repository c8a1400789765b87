"""Bill-level totals and collection variance."""

from models import Bill, Item, PersonSplit, Reconciliation
from utils.money import format_currency


def reconcile(
    items: list[Item],
    splits: list[PersonSplit],
    unassigned_item_ids=(),
) -> Reconciliation:
    """
    Aggregate per-member results against the invoice subtotal.

    total_extracted counts every item, assigned or not, so unassigned items
    show up as a shortfall in the variance as well as in unassigned_item_ids.
    """
    total_extracted = sum(item.extended_price for item in items)
    total_final = sum(split.final_payable for split in splits)

    return Reconciliation(
        total_extracted=total_extracted,
        total_final=total_final,
        variance=total_final - total_extracted,
        unassigned_item_ids=tuple(unassigned_item_ids),
    )


def build_warnings(bill: Bill, result) -> list[str]:
    """Human-readable warnings to show before a bill is finalized.

    result is a Reconciliation or SplitResult for the same bill.
    """
    warnings = []

    if result.unassigned_item_ids:
        names = {item.id: item.name for item in bill.items}
        item_names = ", ".join(names.get(i, i) for i in result.unassigned_item_ids)
        warnings.append(f"The following items are not assigned to anyone: {item_names}")

    if result.variance < 0:
        shortfall = format_currency(-result.variance)
        warnings.append(
            f"Total collected is {shortfall} less than invoice total. "
            "Consider adjusting fees or discounts."
        )

    return warnings
