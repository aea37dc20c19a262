import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.points_engine.config import ScoringConfig
from common.points_engine.context import ScoringContext
from common.points_engine.models import ParseFailurePolicy, Receipt


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

MM_CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_receipt() -> Receipt:
    return Receipt.model_validate(TARGET_RECEIPT)


@pytest.fixture
def mm_receipt() -> Receipt:
    return Receipt.model_validate(MM_CORNER_MARKET_RECEIPT)


@pytest.fixture
def make_receipt():
    def _make(
        *,
        retailer: str = "Shop",
        purchase_date: str = "2022-01-02",
        purchase_time: str = "10:00",
        items=None,
        total: str = "1.01",
    ) -> Receipt:
        if items is None:
            items = [{"shortDescription": "ab", "price": "1.01"}]
        return Receipt.model_validate(
            {
                "retailer": retailer,
                "purchaseDate": purchase_date,
                "purchaseTime": purchase_time,
                "items": items,
                "total": total,
            }
        )

    return _make


@pytest.fixture
def make_ctx():
    def _make(
        receipt: Receipt,
        *,
        rules: dict | None = None,
        policy: ParseFailurePolicy = ParseFailurePolicy.STRICT,
    ) -> ScoringContext:
        cfg = ScoringConfig(parse_failure_policy=policy, rules=rules or {})
        return ScoringContext(receipt=receipt, config=cfg)

    return _make
