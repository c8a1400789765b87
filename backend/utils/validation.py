"""Structural validation of a bill snapshot before splitting."""

from models import Bill, Member


class BillStructureError(ValueError):
    """The bill or member list violates the collaborator contract."""


def validate_bill_structure(bill: Bill, members: list[Member]) -> None:
    """Validate ids and references; raises BillStructureError on the first problem."""
    member_ids = set()
    for member in members:
        if member.id in member_ids:
            raise BillStructureError(f"Duplicate member ID {member.id!r}")
        member_ids.add(member.id)

    item_ids = set()
    for item in bill.items:
        if item.id in item_ids:
            raise BillStructureError(f"Duplicate item ID {item.id!r}")
        if item.unit_price < 0:
            raise BillStructureError(f"Item {item.id!r} has a negative unit price")
        if item.quantity < 1:
            raise BillStructureError(f"Item {item.id!r} must have a quantity of at least 1")
        item_ids.add(item.id)

    assigned_items = set()
    for assignment in bill.assignments:
        if assignment.item_id not in item_ids:
            raise BillStructureError(f"Assignment references unknown item ID {assignment.item_id!r}")
        if assignment.item_id in assigned_items:
            raise BillStructureError(f"Item {assignment.item_id!r} has more than one assignment")
        assigned_items.add(assignment.item_id)

        for member_id in assignment.member_ids:
            if member_id not in member_ids:
                raise BillStructureError(
                    f"Member ID {member_id!r} not found in assignment for item {assignment.item_id!r}"
                )
