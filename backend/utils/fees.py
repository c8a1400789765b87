"""Per-member fee, free cash and discount application."""

import logging

from models import PersonSplit, Rate
from utils.money import parse_percent, percent_of

logger = logging.getLogger(__name__)


def apply(
    actual_cost: int,
    free_cash: int,
    platform_fee_percent: Rate,
    discount_percent: Rate,
    member_id: str = "",
    member_name: str = "",
) -> PersonSplit:
    """
    Turn a member's allocated cost into a final payable amount.

    The order is a business rule and must not change:
    fee on the cost, then free cash against cost + fee, then discount on
    what is left. Fee and discount are rounded half-up to a whole cent.
    """
    fee_percent = parse_percent(platform_fee_percent, "platform fee percent")
    disc_percent = parse_percent(discount_percent, "discount percent")

    if free_cash < 0:
        logger.warning(f"Member {member_id!r} has negative free cash ({free_cash}), treating as 0")
        free_cash = 0

    platform_fee = percent_of(actual_cost, fee_percent)
    cost_before_credit = actual_cost + platform_fee
    free_cash_used = min(free_cash, cost_before_credit)

    amount_after_credit = cost_before_credit - free_cash_used
    discount = percent_of(amount_after_credit, disc_percent)
    final_payable = max(0, amount_after_credit - discount)

    return PersonSplit(
        member_id=member_id,
        member_name=member_name,
        actual_cost=actual_cost,
        platform_fee=platform_fee,
        free_cash_used=free_cash_used,
        discount=discount,
        final_payable=final_payable,
    )
