from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from receipts.service import ReceiptService


router = APIRouter(prefix="/receipts", tags=["receipts"])


def get_receipt_service(request: Request) -> ReceiptService:
    return request.app.state.receipt_service


@router.post("/process")
def process_receipt(
    payload: Any = Body(...),
    service: ReceiptService = Depends(get_receipt_service),
):
    receipt_id = service.submit(payload)
    return {"id": receipt_id}


@router.get("/process", include_in_schema=False)
def process_receipt_wrong_method():
    raise HTTPException(status_code=405, detail="Method Not Allowed", headers={"Allow": "POST"})


@router.get("")
@router.get("/")
def list_receipts(service: ReceiptService = Depends(get_receipt_service)):
    return [{"id": receipt_id, **receipt.to_wire()} for receipt_id, receipt in service.list_receipts()]


@router.get("/{receipt_id}/points")
def get_receipt_points(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    return {"points": service.get_points(receipt_id)}


@router.get("/{receipt_id}/breakdown")
def get_receipt_breakdown(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    report = service.get_points_report(receipt_id)
    return {"id": receipt_id, **report.model_dump(mode="json")}


@router.get("/{receipt_id}")
def get_receipt_points_short(receipt_id: str, service: ReceiptService = Depends(get_receipt_service)):
    # The bare id path scores the receipt too.
    return {"points": service.get_points(receipt_id)}
