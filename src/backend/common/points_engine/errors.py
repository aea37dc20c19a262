from __future__ import annotations

from typing import Any, Dict, List, Optional


class ReceiptError(Exception):
    """Base class for receipt ingestion and scoring errors."""


class ReceiptValidationError(ReceiptError, ValueError):
    def __init__(self, problems: List[Dict[str, str]], message: Optional[str] = None):
        self.problems = problems
        if message is None:
            message = "; ".join(f"{p['field']}: {p['message']}" for p in problems) or "Invalid receipt"
        super().__init__(message)


class ReceiptNotFoundError(ReceiptError, LookupError):
    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt not found: {receipt_id}")
        self.receipt_id = receipt_id


class ReceiptParseError(ReceiptError, ValueError):
    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(f"Could not parse {field} {value!r} as {expected}")
        self.field = field
        self.value = value
        self.expected = expected
