from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Type

from pydantic import BaseModel

from .context import ScoringContext
from .models import RuleResult, RuleResultDetail


class Rule(ABC):
    rule_id: str
    rule_title: str
    config_model: Type[BaseModel]

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, ctx: ScoringContext) -> RuleResult:  # pragma: no cover
        raise NotImplementedError

    def result(
        self,
        points: int,
        summary: str,
        details: Optional[List[RuleResultDetail]] = None,
    ) -> RuleResult:
        return RuleResult(
            rule_id=self.rule_id,
            rule_title=self.rule_title,
            points=points,
            summary=summary,
            details=details or [],
        )

    def disabled(self) -> RuleResult:
        return self.result(0, "Rule disabled by scoring configuration.")
