import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import receipts...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import copy

import pytest

from receipts.service import ReceiptService
from receipts.store import ReceiptStore


TARGET_PAYLOAD = {
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


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_PAYLOAD)


@pytest.fixture
def store() -> ReceiptStore:
    return ReceiptStore()


@pytest.fixture
def service(store) -> ReceiptService:
    return ReceiptService(store)
