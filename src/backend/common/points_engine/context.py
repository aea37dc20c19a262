from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Callable, TypeVar

from .config import ScoringConfig
from .errors import ReceiptParseError
from .models import Item, ParseFailurePolicy, Receipt

V = TypeVar("V")

_AMOUNT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)

# Same magnitude range as a double.
MIN_AMOUNT_EXPONENT = -324
MAX_AMOUNT_EXPONENT = 308

# Values substituted for unparseable fields under ParseFailurePolicy.DEFAULT_ZERO.
ZERO_AMOUNT = Decimal("0")
ZERO_DATE = date.min
ZERO_TIME = time(0, 0)


@dataclass(frozen=True)
class ScoringContext:
    receipt: Receipt
    config: ScoringConfig = field(default_factory=ScoringConfig)

    @property
    def policy(self) -> ParseFailurePolicy:
        return self.config.parse_failure_policy

    def total(self) -> Decimal:
        return self._parse("total", self.receipt.total, parse_amount, ZERO_AMOUNT)

    def item_price(self, index: int, item: Item) -> Decimal:
        return self._parse(f"items[{index}].price", item.price, parse_amount, ZERO_AMOUNT)

    def purchase_date(self) -> date:
        return self._parse("purchaseDate", self.receipt.purchase_date, parse_purchase_date, ZERO_DATE)

    def purchase_time(self) -> time:
        return self._parse("purchaseTime", self.receipt.purchase_time, parse_purchase_time, ZERO_TIME)

    def _parse(self, field_name: str, raw: str, parser: Callable[[str, str], V], zero: V) -> V:
        try:
            return parser(field_name, raw)
        except ReceiptParseError:
            if self.policy == ParseFailurePolicy.DEFAULT_ZERO:
                return zero
            raise


def parse_amount(field_name: str, raw: str) -> Decimal:
    if not _AMOUNT_RE.fullmatch(raw):
        raise ReceiptParseError(field_name, raw, "a decimal amount")
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ReceiptParseError(field_name, raw, "a decimal amount") from exc
    if value and not MIN_AMOUNT_EXPONENT <= value.adjusted() <= MAX_AMOUNT_EXPONENT:
        raise ReceiptParseError(field_name, raw, "a decimal amount in range")
    return value


def parse_purchase_date(field_name: str, raw: str) -> date:
    if not _DATE_RE.fullmatch(raw):
        raise ReceiptParseError(field_name, raw, "a YYYY-MM-DD date")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ReceiptParseError(field_name, raw, "a YYYY-MM-DD date") from exc


def parse_purchase_time(field_name: str, raw: str) -> time:
    if not _TIME_RE.fullmatch(raw):
        raise ReceiptParseError(field_name, raw, "an HH:MM time")
    try:
        return time.fromisoformat(raw)
    except ValueError as exc:
        raise ReceiptParseError(field_name, raw, "an HH:MM time") from exc


def is_multiple_of(value: Decimal, step: Decimal) -> bool:
    # Fractions keep the test exact for amounts wider than the decimal context precision.
    return Fraction(value) % Fraction(step) == 0


def ceil_product(value: Decimal, factor: Decimal) -> int:
    return math.ceil(Fraction(value) * Fraction(factor))
