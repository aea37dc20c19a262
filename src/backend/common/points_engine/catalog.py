from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel

from .config import ScoringConfig
from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    """One scoring rule as the calculator runs it."""

    order: int
    rule_id: str
    rule_title: str

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]
    # Values the rule scores with when no override is configured.
    default_config: Dict[str, Any]
    # Values after the scoring config's overrides for this rule are applied.
    effective_config: Dict[str, Any]
    overridden: bool = False


def build_catalog(scoring_config: Optional[ScoringConfig] = None) -> List[RuleCatalogEntry]:
    """Describe every registered rule in evaluation order.

    Without a `scoring_config` the effective config equals the defaults.
    """
    scoring_config = scoring_config or ScoringConfig()
    entries: List[RuleCatalogEntry] = []
    for order, rule_cls in enumerate(registry, start=1):
        cfg_model = rule_cls.config_model
        effective = scoring_config.get_rule_config(rule_cls.rule_id, cfg_model)
        entries.append(
            RuleCatalogEntry(
                order=order,
                rule_id=rule_cls.rule_id,
                rule_title=rule_cls.rule_title,
                module=rule_cls.__module__,
                class_name=rule_cls.__name__,
                config_model=cfg_model.__name__,
                config_schema=cfg_model.model_json_schema(),
                default_config=cfg_model().model_dump(mode="json"),
                effective_config=effective.model_dump(mode="json"),
                overridden=rule_cls.rule_id in scoring_config.rules,
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print the scoring rules in evaluation order with their default and effective configs."
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument(
        "--rules-config",
        default=None,
        help="JSON file of per-rule overrides, as read from POINTS_RULES_CONFIG_PATH.",
    )
    args = parser.parse_args(argv)

    scoring_config = None
    if args.rules_config:
        from common.settings import load_rules_config

        scoring_config = ScoringConfig(rules=load_rules_config(Path(args.rules_config)))

    catalog = [e.model_dump() for e in build_catalog(scoring_config)]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
