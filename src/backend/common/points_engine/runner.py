from __future__ import annotations

import logging
from typing import Iterable, Optional

from .config import ScoringConfig
from .context import ScoringContext
from .models import PointsReport, Receipt
from .registry import registry

logger = logging.getLogger(__name__)


class PointsCalculator:
    """Runs every registered scoring rule against a receipt and sums the points.

    Evaluation is pure: the receipt is never mutated and nothing outside the
    context is read, so one calculator can be shared across threads.
    """

    def __init__(self, rules: Optional[Iterable] = None):
        self._rules = list(rules) if rules is not None else registry.create_all()

    @property
    def rule_ids(self) -> list[str]:
        return [rule.rule_id for rule in self._rules]

    def run(self, ctx: ScoringContext, *, rule_ids: Optional[set[str]] = None) -> PointsReport:
        results = []
        for rule in self._rules:
            if rule_ids is not None and rule.rule_id not in rule_ids:
                continue
            res = rule.evaluate(ctx)
            logger.debug("Rule %s contributed %d points", res.rule_id, res.points)
            results.append(res)

        return PointsReport(
            points=sum(res.points for res in results),
            parse_failure_policy=ctx.policy,
            results=results,
        )


def calculate_points(receipt: Receipt, config: Optional[ScoringConfig] = None) -> int:
    ctx = ScoringContext(receipt=receipt, config=config or ScoringConfig())
    return PointsCalculator().run(ctx).points
