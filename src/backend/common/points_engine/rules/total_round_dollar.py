from __future__ import annotations

from decimal import Decimal

from ..config import TotalRoundDollarRuleConfig
from ..context import ScoringContext, is_multiple_of
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class TOTAL_ROUND_DOLLAR(Rule):
    rule_id = "TOTAL-ROUND-DOLLAR"
    rule_title = "Total is a round dollar amount with no cents"
    config_model = TotalRoundDollarRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, TotalRoundDollarRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        total = ctx.total()
        round_dollar = is_multiple_of(total, Decimal(1))
        if round_dollar:
            points = cfg.points
            summary = f"Total {total} is a round dollar amount."
        else:
            points = 0
            summary = f"Total {total} has cents."

        return self.result(
            points,
            summary,
            details=[
                RuleResultDetail(
                    key="total",
                    message="Total checked for whole dollars.",
                    values={"total": str(total), "round_dollar": round_dollar},
                )
            ],
        )
