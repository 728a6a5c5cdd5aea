import pytest

from maniuz.services import pricing

PRODUCT = {"id": 1, "items_per_box": 12, "prices": {1: 8.5, 2: 7.0}, "box_prices": {2: 80.0}}


class TestItemsPerBox:
    def test_uses_product_value(self):
        assert pricing.items_per_box(PRODUCT) == 12

    @pytest.mark.parametrize("value", [None, 0, -3])
    def test_falls_back_to_default(self, value):
        assert pricing.items_per_box({"items_per_box": value}) == 24


class TestPrices:
    def test_unit_price_of_tier(self):
        assert pricing.unit_price(PRODUCT, 1) == 8.5

    def test_missing_tier_price_is_zero(self):
        assert pricing.unit_price(PRODUCT, 3) == 0.0
        assert pricing.unit_price(PRODUCT, None) == 0.0

    def test_explicit_box_price_wins(self):
        assert pricing.box_price(PRODUCT, 2) == 80.0

    def test_box_price_derived_from_unit_price(self):
        assert pricing.box_price(PRODUCT, 1) == 102.0

    def test_line_price_by_unit(self):
        assert pricing.line_price(PRODUCT, 1, "piece") == 8.5
        assert pricing.line_price(PRODUCT, 2, "box") == 80.0

    def test_line_price_rejects_unknown_unit(self):
        with pytest.raises(ValueError):
            pricing.line_price(PRODUCT, 1, "pallet")


def test_pieces():
    assert pricing.pieces(3, "piece", 24) == 3
    assert pricing.pieces(2, "box", 24) == 48


class TestResolvePriceType:
    def test_customer_tier(self):
        assert pricing.resolve_price_type_id({"price_type_id": 2}, [1, 2], 1) == 2

    def test_deleted_customer_tier_falls_back_to_default(self):
        assert pricing.resolve_price_type_id({"price_type_id": 9}, [1, 2], 2) == 2

    def test_first_tier_without_default(self):
        assert pricing.resolve_price_type_id({"price_type_id": None}, [5, 6], None) == 5

    def test_no_tiers(self):
        assert pricing.resolve_price_type_id(None, [], None) is None
