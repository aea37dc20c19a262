from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import ParseFailurePolicy

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True


class RetailerAlphanumericRuleConfig(RuleConfigBase):
    points_per_character: int = 1


class TotalRoundDollarRuleConfig(RuleConfigBase):
    points: int = 50


class TotalQuarterMultipleRuleConfig(RuleConfigBase):
    points: int = 25
    multiple: Decimal = Field(default=Decimal("0.25"), gt=0)


class ItemPairsRuleConfig(RuleConfigBase):
    points_per_pair: int = 5


class ItemDescriptionLengthRuleConfig(RuleConfigBase):
    # Trimmed description length must be a multiple of this; an empty description (length 0) qualifies.
    length_multiple: int = Field(default=3, gt=0)
    price_multiplier: Decimal = Decimal("0.2")


class PurchaseDayOddRuleConfig(RuleConfigBase):
    points: int = 6


class PurchaseTimeWindowRuleConfig(RuleConfigBase):
    points: int = 10
    # Half-open window [start_hour, end_hour) on the 24-hour clock.
    start_hour: int = Field(default=14, ge=0, le=24)
    end_hour: int = Field(default=16, ge=0, le=24)

    @model_validator(mode="after")
    def _check_window(self) -> "PurchaseTimeWindowRuleConfig":
        if self.start_hour > self.end_hour:
            raise ValueError("start_hour must not be after end_hour")
        return self


class ScoringConfig(BaseModel):
    """Scoring configuration for all rules.

    Rules pull their typed config via `get_rule_config`; rules without an entry
    use their config model's defaults.
    """

    parse_failure_policy: ParseFailurePolicy = ParseFailurePolicy.STRICT
    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)
