from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Type

from pydantic import BaseModel

from .rule import Rule


class RuleRegistry:
    """Scoring rule classes keyed by rule id, kept in evaluation order."""

    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError("Scoring rule class missing rule_id")
        if rule_id in self._rules:
            raise ValueError(f"Scoring rule {rule_id} is already registered")
        if getattr(rule_cls, "config_model", None) is None:
            raise ValueError(f"Scoring rule {rule_id} has no config_model")
        self._rules[rule_id] = rule_cls

    def create_all(self) -> List[Rule]:
        return [cls() for cls in self._rules.values()]

    def get(self, rule_id: str) -> Type[Rule]:
        try:
            return self._rules[rule_id]
        except KeyError:
            known = ", ".join(self._rules)
            raise KeyError(f"Unknown scoring rule {rule_id!r} (known: {known})") from None

    def ids(self) -> List[str]:
        return list(self._rules)

    def config_model_for(self, rule_id: str) -> Type[BaseModel]:
        return self.get(rule_id).config_model

    def validate_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> Dict[str, BaseModel]:
        """Parse per-rule overrides with each rule's config model.

        Raises `KeyError` for an id no rule registered and pydantic's
        `ValidationError` for a bad or unknown field.
        """
        return {
            rule_id: self.config_model_for(rule_id).model_validate(values)
            for rule_id, values in overrides.items()
        }

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Type[Rule]]:
        return iter(self._rules.values())


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
