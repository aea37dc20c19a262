from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from common.points_engine import (  # noqa: E402
    PointsCalculator,
    ReceiptError,
    ScoringContext,
)
from common.settings import get_app_config, parse_policy  # noqa: E402
from receipts.service import validate_receipt  # noqa: E402


def _load_json(path: Path):
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def score_file(path: Path, calculator: PointsCalculator, scoring_config) -> dict:
    receipt = validate_receipt(_load_json(path))
    report = calculator.run(ScoringContext(receipt=receipt, config=scoring_config))
    return {"file": str(path), **report.model_dump(mode="json")}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score receipt JSON files with the loyalty points rules and print the results."
    )
    parser.add_argument("receipts", nargs="+", help="Paths to receipt JSON files.")
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print the per-rule points report as JSON instead of the total only.",
    )
    parser.add_argument(
        "--policy",
        choices=("strict", "default_zero"),
        default=None,
        help="Parse failure policy (defaults to POINTS_PARSE_FAILURE_POLICY or strict).",
    )
    args = parser.parse_args(argv)

    scoring_config = get_app_config().scoring_config()
    if args.policy:
        scoring_config = scoring_config.model_copy(update={"parse_failure_policy": parse_policy(args.policy)})
    calculator = PointsCalculator()

    exit_code = 0
    reports = []
    for raw_path in args.receipts:
        path = Path(raw_path)
        try:
            report = score_file(path, calculator, scoring_config)
        except (OSError, ValueError, ReceiptError) as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            exit_code = 1
            continue
        if args.breakdown:
            reports.append(report)
        else:
            print(f"{path}: {report['points']}")

    if args.breakdown:
        print(json.dumps(reports, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
