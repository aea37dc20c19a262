import pytest
from pydantic import ValidationError

from common.points_engine.models import Receipt


def test_receipt_accepts_wire_names_and_keeps_items_immutable(target_receipt):
    assert target_receipt.purchase_date == "2022-01-01"
    assert isinstance(target_receipt.items, tuple)
    with pytest.raises(ValidationError):
        target_receipt.retailer = "Other"


def test_receipt_round_trips_wire_names(target_receipt):
    wire = target_receipt.to_wire()
    assert set(wire) == {"retailer", "purchaseDate", "purchaseTime", "items", "total"}
    assert wire["items"][0] == {"shortDescription": "Mountain Dew 12PK", "price": "6.49"}


@pytest.mark.parametrize("field", ["retailer", "purchaseDate", "purchaseTime", "total"])
def test_required_fields_must_be_non_empty(make_receipt, field):
    payload = make_receipt().to_wire()
    payload[field] = ""
    with pytest.raises(ValidationError):
        Receipt.model_validate(payload)


def test_items_must_not_be_empty(make_receipt):
    payload = make_receipt().to_wire()
    payload["items"] = []
    with pytest.raises(ValidationError):
        Receipt.model_validate(payload)


def test_numbers_are_not_accepted_for_text_fields(make_receipt):
    payload = make_receipt().to_wire()
    payload["total"] = 35.35
    with pytest.raises(ValidationError):
        Receipt.model_validate(payload)


def test_item_fields_only_need_to_be_present(make_receipt):
    receipt = make_receipt(items=[{"shortDescription": "", "price": ""}])
    assert receipt.items[0].short_description == ""
