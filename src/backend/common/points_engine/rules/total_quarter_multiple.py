from __future__ import annotations

from ..config import TotalQuarterMultipleRuleConfig
from ..context import ScoringContext, is_multiple_of
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class TOTAL_QUARTER_MULTIPLE(Rule):
    rule_id = "TOTAL-QUARTER-MULTIPLE"
    rule_title = "Total is a multiple of 0.25"
    config_model = TotalQuarterMultipleRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, TotalQuarterMultipleRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        total = ctx.total()
        matches = is_multiple_of(total, cfg.multiple)
        points = cfg.points if matches else 0
        summary = (
            f"Total {total} is a multiple of {cfg.multiple}."
            if matches
            else f"Total {total} is not a multiple of {cfg.multiple}."
        )
        return self.result(
            points,
            summary,
            details=[
                RuleResultDetail(
                    key="total",
                    message="Total checked for an exact multiple.",
                    values={"total": str(total), "multiple": str(cfg.multiple), "is_multiple": matches},
                )
            ],
        )
