"""Splits router: live split preview and the pending -> paid transition."""

import logging
from fastapi import APIRouter, HTTPException

import models
import schemas
from utils.reconcile import build_warnings
from utils.splits import compute_splits
from utils.validation import BillStructureError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["splits"])


def to_domain(request: schemas.SplitRequest) -> tuple[models.Bill, list[models.Member]]:
    """Convert the request snapshot into engine models."""
    bill = models.Bill(
        title=request.bill.title,
        items=tuple(
            models.Item(id=i.id, name=i.name, unit_price=i.unit_price, quantity=i.quantity)
            for i in request.bill.items
        ),
        assignments=tuple(
            models.Assignment(item_id=a.item_id, member_ids=frozenset(a.member_ids))
            for a in request.bill.assignments
        ),
        platform_fee_percent=request.bill.platform_fee_percent,
        discount_percent=request.bill.discount_percent,
        status=models.BillStatus(request.bill.status),
    )
    members = [models.Member(id=m.id, name=m.name, free_cash=m.free_cash) for m in request.members]
    return bill, members


def ensure_pending(bill: models.Bill) -> None:
    """Paid bills are terminal; their split must not be recomputed."""
    if bill.status == models.BillStatus.PAID:
        raise HTTPException(status_code=409, detail="Bill is already paid; its split is frozen")


def run_split(bill: models.Bill, members: list[models.Member]) -> models.SplitResult:
    try:
        return compute_splits(bill, members)
    except BillStructureError as e:
        logger.info(f"Rejected bill snapshot: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/splits", response_model=schemas.SplitResponse)
def preview_splits(request: schemas.SplitRequest):
    bill, members = to_domain(request)
    ensure_pending(bill)

    result = run_split(bill, members)

    return schemas.SplitResponse(
        splits=[schemas.PersonSplit.model_validate(s) for s in result.splits],
        total_extracted=result.total_extracted,
        total_final=result.total_final,
        variance=result.variance,
        variance_status=result.status,
        unassigned_item_ids=list(result.unassigned_item_ids),
        warnings=build_warnings(bill, result),
    )


@router.post("/splits/mark-paid", response_model=schemas.PaidBill)
def mark_paid(request: schemas.SplitRequest, allow_unassigned: bool = False):
    bill, members = to_domain(request)
    ensure_pending(bill)

    result = run_split(bill, members)

    # Unassigned items need explicit confirmation before the split is frozen
    if result.unassigned_item_ids and not allow_unassigned:
        names = {item.id: item.name for item in bill.items}
        item_names = ", ".join(names[i] for i in result.unassigned_item_ids)
        raise HTTPException(
            status_code=400,
            detail=f"The following items are not assigned to anyone: {item_names}"
        )

    logger.info(
        f"Bill {bill.title or '(untitled)'} marked as paid: "
        f"collected {result.total_final} of {result.total_extracted} cents"
    )

    return schemas.PaidBill(
        title=bill.title,
        platform_fee_percent=float(result.platform_fee_percent),
        discount_percent=float(result.discount_percent),
        items=request.bill.items,
        assignments=request.bill.assignments,
        splits=[schemas.PersonSplit.model_validate(s) for s in result.splits],
        total_extracted=result.total_extracted,
        total_final=result.total_final,
        variance=result.variance,
        unassigned_item_ids=list(result.unassigned_item_ids),
    )
