"""Loyalty points rules engine for purchase receipts.

This package contains only scoring logic:
- Rule inputs are a receipt value + scoring config.
- No HTTP, JSON transport, or storage lives here.
"""

from .config import ScoringConfig
from .context import ScoringContext
from .errors import (
    ReceiptError,
    ReceiptNotFoundError,
    ReceiptParseError,
    ReceiptValidationError,
)
from .models import (
    Item,
    ParseFailurePolicy,
    PointsReport,
    Receipt,
    RuleResult,
    RuleResultDetail,
)
from .runner import PointsCalculator, calculate_points

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
