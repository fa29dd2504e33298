"""
Receipt API endpoints.

POST /receipts/process        — score and store a receipt → {"id": ...}
GET  /receipts/{id}/points    — points awarded to a stored receipt
GET  /receipts                — every stored receipt, keyed by id
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from receipt_processor.config import settings
from receipt_processor.schemas import PointsResponse, ProcessResponse, Receipt
from receipt_processor.scoring.parsing import parse_purchase_date, parse_purchase_time
from receipt_processor.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


def check_purchase_datetime(receipt: Receipt) -> None:
    """Raise 400 if the purchase date or time cannot be parsed."""
    if parse_purchase_date(receipt.purchase_date) is None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid purchaseDate: {receipt.purchase_date!r}",
        )
    if parse_purchase_time(receipt.purchase_time) is None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid purchaseTime: {receipt.purchase_time!r}",
        )


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    if settings.STRICT_PURCHASE_DATETIME:
        check_purchase_datetime(receipt)

    receipt_id = store.submit(receipt)
    logger.info(
        "Stored receipt %s: retailer=%r  items=%d",
        receipt_id, receipt.retailer, len(receipt.items),
    )
    return ProcessResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    points = store.get_points(receipt_id)
    if points is None:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)


# ── GET /receipts ────────────────────────────────────────────────────────
@router.get("/receipts", response_model=dict[str, Receipt])
def list_receipts(store: ReceiptStore = Depends(get_store)):
    receipts = store.list_all()
    logger.info("Listing %d receipts", len(receipts))
    return receipts


# ── GET /receipts/<anything else> ────────────────────────────────────────
# Registered last so the routes above take precedence.
@router.get("/receipts/{path:path}", include_in_schema=False)
def malformed_receipt_path(path: str):
    if path.strip("/") == "process":
        raise HTTPException(
            status_code=405,
            detail="Method Not Allowed",
            headers={"Allow": "POST"},
        )
    raise HTTPException(status_code=400, detail="Invalid URL path")
