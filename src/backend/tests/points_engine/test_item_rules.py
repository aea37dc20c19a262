import pytest

from common.points_engine.errors import ReceiptParseError
from common.points_engine.models import ParseFailurePolicy
from common.points_engine.rules.item_description_length import ITEM_DESCRIPTION_LENGTH
from common.points_engine.rules.item_pairs import ITEM_PAIRS


def _items(count: int):
    return [{"shortDescription": "ab", "price": "1.00"} for _ in range(count)]


@pytest.mark.parametrize("count, expected", [(1, 0), (2, 5), (4, 10), (5, 10)])
def test_item_pairs(make_receipt, make_ctx, count, expected):
    res = ITEM_PAIRS().evaluate(make_ctx(make_receipt(items=_items(count))))
    assert res.points == expected


def test_description_multiple_of_three_earns_ceil_of_fifth_of_price(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "Emils Cheese Pizza", "price": "12.25"}])
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt))
    assert res.points == 3
    assert res.details[0].values["length"] == 18


def test_description_is_trimmed_before_measuring(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"}])
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt))
    assert res.points == 3
    assert res.details[0].values["short_description"] == "Klarbrunn 12-PK 12 FL OZ"


def test_empty_description_counts_as_multiple_of_three(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "   ", "price": "5.01"}])
    assert ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt)).points == 2


def test_exact_product_is_not_rounded_up(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "abc", "price": "5.00"}])
    assert ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt)).points == 1


def test_non_qualifying_items_are_skipped(make_receipt, make_ctx):
    receipt = make_receipt(
        items=[
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        ]
    )
    res = ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt))
    assert res.points == 0
    assert res.details == []


def test_bad_price_only_matters_for_qualifying_items(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "ab", "price": "oops"}])
    assert ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt)).points == 0


def test_bad_price_on_qualifying_item(make_receipt, make_ctx):
    receipt = make_receipt(items=[{"shortDescription": "ab", "price": "1"}, {"shortDescription": "abc", "price": "oops"}])
    with pytest.raises(ReceiptParseError) as excinfo:
        ITEM_DESCRIPTION_LENGTH().evaluate(make_ctx(receipt))
    assert excinfo.value.field == "items[1].price"

    lenient = make_ctx(receipt, policy=ParseFailurePolicy.DEFAULT_ZERO)
    assert ITEM_DESCRIPTION_LENGTH().evaluate(lenient).points == 0
