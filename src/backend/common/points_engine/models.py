from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ParseFailurePolicy(str, Enum):
    STRICT = "STRICT"
    DEFAULT_ZERO = "DEFAULT_ZERO"


class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr


class Receipt(BaseModel):
    """A submitted purchase receipt.

    Wire names are camelCase (``purchaseDate``); Python code uses the snake_case
    attribute names. Amounts, dates and times stay as submitted text and are only
    interpreted when points are calculated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: StrictStr = Field(min_length=1)
    purchase_date: StrictStr = Field(alias="purchaseDate", min_length=1)
    purchase_time: StrictStr = Field(alias="purchaseTime", min_length=1)
    items: Tuple[Item, ...] = Field(min_length=1)
    total: StrictStr = Field(min_length=1)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class RuleResultDetail(BaseModel):
    key: str
    message: str
    values: Dict[str, Any] = Field(default_factory=dict)


class RuleResult(BaseModel):
    rule_id: str
    rule_title: str
    points: int = 0
    summary: str = ""

    details: List[RuleResultDetail] = Field(default_factory=list)


class PointsReport(BaseModel):
    points: int
    parse_failure_policy: ParseFailurePolicy
    results: List[RuleResult] = Field(default_factory=list)

    def points_by_rule(self) -> Dict[str, int]:
        return {res.rule_id: res.points for res in self.results}
