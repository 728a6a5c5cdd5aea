import pytest

from maniuz.services.cart import Cart

PRODUCTS = {
    1: {"id": 1, "items_per_box": 24, "prices": {1: 8.5}, "box_prices": {}},
    2: {"id": 2, "items_per_box": 6, "prices": {1: 25.0}, "box_prices": {1: 140.0}},
}


class TestCartItems:
    def test_add_merges_same_product_and_unit(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.add_item(1, 3)
        cart.add_item(1, 1, "box")
        assert len(cart.items) == 2
        assert cart.items[0].quantity == 5
        assert cart.count == 6

    @pytest.mark.parametrize("qty", [0, -1])
    def test_add_rejects_non_positive_quantity(self, qty):
        with pytest.raises(ValueError):
            Cart().add_item(1, qty)

    def test_add_rejects_unknown_unit(self):
        with pytest.raises(ValueError):
            Cart().add_item(1, 1, "crate")

    def test_update_quantity_to_zero_removes_line(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.update_quantity(1, 0)
        assert cart.is_empty()

    def test_remove_only_given_unit(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.add_item(1, 1, "box")
        cart.remove_item(1, "box")
        assert [(it.product_id, it.unit) for it in cart.items] == [(1, "piece")]

    def test_remove_all_units(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.add_item(1, 1, "box")
        cart.remove_item(1)
        assert cart.is_empty()

    def test_clear_resets_delivery(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.set_delivery_type("delivery")
        cart.clear()
        assert cart.is_empty()
        assert cart.delivery_type == "pickup"

    def test_unknown_delivery_type(self):
        with pytest.raises(ValueError):
            Cart().set_delivery_type("drone")


class TestCartTotals:
    def test_total_is_sum_of_lines(self):
        cart = Cart()
        cart.add_item(1, 3)
        cart.add_item(2, 2, "box")
        lines = cart.priced_lines(PRODUCTS, 1)
        assert [line.line_total for line in lines] == [25.5, 280.0]
        assert cart.total_amount(PRODUCTS, 1) == 305.5

    def test_missing_product_contributes_zero(self):
        cart = Cart()
        cart.add_item(1, 2)
        cart.add_item(99, 5)
        lines = cart.priced_lines(PRODUCTS, 1)
        assert lines[1].missing
        assert cart.total_amount(PRODUCTS, 1) == 17.0


class TestCartPersistence:
    def test_dict_round_trip(self):
        cart = Cart()
        cart.add_item(2, 1, "box")
        cart.set_delivery_type("delivery")
        restored = Cart.from_dict(cart.to_dict())
        assert restored == cart

    def test_from_dict_skips_garbage(self):
        data = {
            "items": [
                {"product_id": 1, "quantity": 2},
                {"product_id": "x", "quantity": 1},
                {"quantity": 1},
                {"product_id": 2, "quantity": 0},
                {"product_id": 2, "quantity": 1, "unit": "crate"},
            ],
            "delivery_type": "teleport",
        }
        cart = Cart.from_dict(data)
        assert [(it.product_id, it.quantity, it.unit) for it in cart.items] == [(1, 2, "piece")]
        assert cart.delivery_type == "pickup"

    def test_from_empty(self):
        assert Cart.from_dict(None).is_empty()
