from __future__ import annotations

from ..config import ItemPairsRuleConfig
from ..context import ScoringContext
from ..models import RuleResult
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ITEM_PAIRS(Rule):
    rule_id = "ITEM-PAIRS"
    rule_title = "Five points for every two items on the receipt"
    config_model = ItemPairsRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, ItemPairsRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        item_count = len(ctx.receipt.items)
        pairs = item_count // 2
        return self.result(
            pairs * cfg.points_per_pair,
            f"{item_count} items make {pairs} pairs.",
        )
