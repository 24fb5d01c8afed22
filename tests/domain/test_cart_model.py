"""Unit tests for the Cart aggregate's merge rule."""

from marketplace.domain.model.cart import Cart, CartItem
from marketplace.domain.model.value_objects import Quantity


def _item(product_id: str, qty: int, store: str = "s1") -> CartItem:
    return CartItem(product_id=product_id, quantity=Quantity(qty), store_id=store)


class TestCartMerge:

    def test_merge_into_empty_cart_appends(self):
        cart = Cart(id=None, user_id="u1")
        merged = cart.merge([_item("p1", 1)])
        assert merged == [_item("p1", 1)]

    def test_matching_product_quantities_are_summed(self):
        cart = Cart(id="c1", user_id="u1", items=[_item("p1", 2)])
        merged = cart.merge([_item("p1", 3)])
        assert merged == [_item("p1", 5)]

    def test_new_products_keep_their_position_after_existing(self):
        cart = Cart(id="c1", user_id="u1", items=[_item("p1", 1)])
        merged = cart.merge([_item("p2", 1, "s2"), _item("p1", 1)])
        assert [i.product_id for i in merged] == ["p1", "p2"]
        assert merged[0].quantity.value == 2
        assert merged[1].store_id == "s2"

    def test_merge_keeps_persisted_store_on_match(self):
        cart = Cart(id="c1", user_id="u1", items=[_item("p1", 1, "s1")])
        merged = cart.merge([_item("p1", 1, "s9")])
        assert merged[0].store_id == "s1"

    def test_merge_does_not_mutate_cart(self):
        cart = Cart(id="c1", user_id="u1", items=[_item("p1", 1)])
        cart.merge([_item("p1", 1)])
        assert cart.items == [_item("p1", 1)]

    def test_merging_same_snapshot_twice_doubles(self):
        cart = Cart(id=None, user_id="u1")
        cart.replace_items(cart.merge([_item("p1", 1)]))
        cart.replace_items(cart.merge([_item("p1", 1)]))
        assert cart.items == [_item("p1", 2)]
