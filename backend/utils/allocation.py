"""Item cost allocation: spread each item's extended price over its assignees."""

from models import Allocation, Assignment, Item


def assignments_by_item(assignments: list[Assignment]) -> dict[str, frozenset]:
    return {a.item_id: frozenset(a.member_ids) for a in assignments}


def allocate(items: list[Item], assignments: list[Assignment]) -> Allocation:
    """
    Calculate each member's actual cost from the items assigned to them.

    Algorithm:
    1. Items without assignees are recorded as unassigned and skipped
    2. Each assignee gets extended_price // n cents
    3. The leftover cents go one each to assignees in sorted-id order,
       starting at an offset that rotates with the item's position
    """
    by_item = assignments_by_item(assignments)
    costs = {}
    unassigned = []

    for position, item in enumerate(items):
        member_ids = sorted(by_item.get(item.id, ()))
        if not member_ids:
            unassigned.append(item.id)
            continue

        num_assignees = len(member_ids)
        share_per_person = item.extended_price // num_assignees
        remainder = item.extended_price % num_assignees
        offset = position % num_assignees

        for idx, member_id in enumerate(member_ids):
            # Distance from the rotating start decides who takes a leftover cent
            amount = share_per_person + (1 if (idx - offset) % num_assignees < remainder else 0)
            costs[member_id] = costs.get(member_id, 0) + amount

    return Allocation(costs=costs, unassigned_item_ids=tuple(unassigned))
