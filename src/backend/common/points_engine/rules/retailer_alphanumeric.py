from __future__ import annotations

import re

from ..config import RetailerAlphanumericRuleConfig
from ..context import ScoringContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


@register_rule
class RETAILER_ALPHANUMERIC(Rule):
    rule_id = "RETAILER-ALPHANUMERIC"
    rule_title = "One point for every alphanumeric character in the retailer name"
    config_model = RetailerAlphanumericRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, RetailerAlphanumericRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        retailer = ctx.receipt.retailer
        # Only ASCII letters and digits count; accented letters and symbols are dropped.
        count = len(_NON_ALPHANUMERIC.sub("", retailer))
        points = count * cfg.points_per_character
        return self.result(
            points,
            f"Retailer name has {count} alphanumeric characters.",
            details=[
                RuleResultDetail(
                    key="retailer",
                    message="Alphanumeric characters counted.",
                    values={"retailer": retailer, "alphanumeric_count": count},
                )
            ],
        )
