from __future__ import annotations

from ..config import PurchaseDayOddRuleConfig
from ..context import ScoringContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class PURCHASE_DAY_ODD(Rule):
    rule_id = "PURCHASE-DAY-ODD"
    rule_title = "Purchase date falls on an odd day of the month"
    config_model = PurchaseDayOddRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, PurchaseDayOddRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        purchased_on = ctx.purchase_date()
        odd = purchased_on.day % 2 == 1
        return self.result(
            cfg.points if odd else 0,
            f"Purchase day {purchased_on.day} is {'odd' if odd else 'even'}.",
            details=[
                RuleResultDetail(
                    key="purchaseDate",
                    message="Day of month checked.",
                    values={"purchase_date": purchased_on.isoformat(), "day": purchased_on.day},
                )
            ],
        )
