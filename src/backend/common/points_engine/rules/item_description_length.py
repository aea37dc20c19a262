from __future__ import annotations

from ..config import ItemDescriptionLengthRuleConfig
from ..context import ScoringContext, ceil_product
from ..models import RuleResult, RuleResultDetail
from ..registry import register_rule
from ..rule import Rule


@register_rule
class ITEM_DESCRIPTION_LENGTH(Rule):
    rule_id = "ITEM-DESCRIPTION-LENGTH"
    rule_title = "Items whose trimmed description length is a multiple of 3 earn a share of their price"
    config_model = ItemDescriptionLengthRuleConfig

    def evaluate(self, ctx: ScoringContext) -> RuleResult:
        cfg = ctx.config.get_rule_config(self.rule_id, ItemDescriptionLengthRuleConfig)
        if not cfg.enabled:
            return self.disabled()

        points = 0
        details: list[RuleResultDetail] = []
        for index, item in enumerate(ctx.receipt.items):
            description = item.short_description.strip()
            if len(description) % cfg.length_multiple != 0:
                continue
            # Prices are only parsed for qualifying items.
            price = ctx.item_price(index, item)
            earned = ceil_product(price, cfg.price_multiplier)
            points += earned
            details.append(
                RuleResultDetail(
                    key=f"items[{index}]",
                    message="Description length qualifies.",
                    values={
                        "short_description": description,
                        "length": len(description),
                        "price": str(price),
                        "points": earned,
                    },
                )
            )

        return self.result(
            points,
            f"{len(details)} of {len(ctx.receipt.items)} items have a qualifying description length.",
            details=details,
        )
