from __future__ import annotations

from ..config import PurchaseTimeWindowRuleConfig
from ..context import ScoringContext
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class PURCHASE_TIME_AFTERNOON(Rule):
    rule_id = "PURCHASE-TIME-AFTERNOON"
    rule_title = "Purchase time is after 2:00pm and before 4:00pm"
    config_model = PurchaseTimeWindowRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, PurchaseTimeWindowRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        purchased_at = ctx.purchase_time()
        # Only the hour matters: 14:00 counts, 16:00 does not.
        in_window = cfg.start_hour <= purchased_at.hour < cfg.end_hour
        window = f"[{cfg.start_hour:02d}:00, {cfg.end_hour:02d}:00)"
        return self.result(
            cfg.points if in_window else 0,
            f"Purchase time {purchased_at.strftime('%H:%M')} is {'inside' if in_window else 'outside'} {window}.",
            details=[
                RuleResultDetail(
                    key="purchaseTime",
                    message="Purchase hour checked against the window.",
                    values={
                        "purchase_time": purchased_at.strftime("%H:%M"),
                        "hour": purchased_at.hour,
                        "start_hour": cfg.start_hour,
                        "end_hour": cfg.end_hour,
                    },
                )
            ],
        )
