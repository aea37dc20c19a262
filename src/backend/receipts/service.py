from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from common.points_engine import PointsCalculator, ScoringConfig, ScoringContext
from common.points_engine.errors import ReceiptParseError, ReceiptValidationError
from common.points_engine.models import PointsReport, Receipt

from .store import ReceiptStore

logger = logging.getLogger(__name__)


class ReceiptService:
    """Entry points consumed by the transport layer: submit, score, list."""

    def __init__(
        self,
        store: Optional[ReceiptStore] = None,
        *,
        scoring_config: Optional[ScoringConfig] = None,
        calculator: Optional[PointsCalculator] = None,
    ) -> None:
        self.store = store if store is not None else ReceiptStore()
        self.scoring_config = scoring_config or ScoringConfig()
        self.calculator = calculator or PointsCalculator()

    def submit(self, payload: Union[Receipt, Mapping[str, Any]]) -> str:
        receipt = validate_receipt(payload)
        receipt_id = self.store.insert(receipt)
        logger.info("Accepted receipt %s from %r with %d items", receipt_id, receipt.retailer, len(receipt.items))
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        return self.get_points_report(receipt_id).points

    def get_points_report(self, receipt_id: str) -> PointsReport:
        receipt = self.store.get(receipt_id)
        ctx = ScoringContext(receipt=receipt, config=self.scoring_config)
        try:
            return self.calculator.run(ctx)
        except ReceiptParseError as exc:
            logger.warning("Cannot score receipt %s: %s", receipt_id, exc)
            raise

    def list_receipts(self) -> list[tuple[str, Receipt]]:
        return self.store.list()


def validate_receipt(payload: Union[Receipt, Mapping[str, Any]]) -> Receipt:
    """Build a Receipt from a decoded JSON object, or raise ReceiptValidationError."""
    if isinstance(payload, Receipt):
        return payload
    if not isinstance(payload, Mapping):
        logger.info("Rejected receipt: body is %s, not an object", type(payload).__name__)
        raise ReceiptValidationError([{"field": "body", "message": "Receipt must be a JSON object"}])
    try:
        return Receipt.model_validate(dict(payload))
    except ValidationError as exc:
        problems = [
            {
                "field": _format_loc(err["loc"]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        logger.info("Rejected receipt: %s", problems)
        raise ReceiptValidationError(problems) from exc


def _format_loc(loc: tuple) -> str:
    text = ""
    for part in loc:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text or "body"
