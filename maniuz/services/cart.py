from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from maniuz.config import settings
from maniuz.constants import DELIVERY_PICKUP, DELIVERY_TYPES, UNIT_PIECE, UNITS
from maniuz.services import pricing
from maniuz.utils.validators import require_positive_number


@dataclass
class CartItem:
    product_id: int
    quantity: int
    unit: str = UNIT_PIECE  # piece / box


@dataclass
class CartLine:
    item: CartItem
    product: Optional[Dict[str, Any]]
    price: float
    line_total: float

    @property
    def missing(self) -> bool:
        return self.product is None


@dataclass
class Cart:
    """Per-browser cart; lives in the signed session cookie between requests."""

    items: List[CartItem] = field(default_factory=list)
    delivery_type: str = DELIVERY_PICKUP

    def _find(self, product_id: int, unit: str) -> Optional[CartItem]:
        for it in self.items:
            if it.product_id == product_id and it.unit == unit:
                return it
        return None

    def add_item(self, product_id: int, quantity: int, unit: str = UNIT_PIECE) -> None:
        require_positive_number(quantity, "quantity")
        if unit not in UNITS:
            raise ValueError(f"unknown unit: {unit}")
        existing = self._find(product_id, unit)
        if existing:
            existing.quantity += quantity
        else:
            self.items.append(CartItem(product_id=product_id, quantity=quantity, unit=unit))

    def remove_item(self, product_id: int, unit: Optional[str] = None) -> None:
        self.items = [
            it for it in self.items
            if not (it.product_id == product_id and (unit is None or it.unit == unit))
        ]

    def update_quantity(self, product_id: int, quantity: int, unit: str = UNIT_PIECE) -> None:
        if quantity <= 0:
            self.remove_item(product_id, unit)
            return
        existing = self._find(product_id, unit)
        if existing:
            existing.quantity = quantity

    def set_delivery_type(self, delivery_type: str) -> None:
        if delivery_type not in DELIVERY_TYPES:
            raise ValueError(f"unknown delivery type: {delivery_type}")
        self.delivery_type = delivery_type

    def clear(self) -> None:
        self.items = []
        self.delivery_type = DELIVERY_PICKUP

    @property
    def count(self) -> int:
        return sum(it.quantity for it in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def priced_lines(self, products: Dict[int, Dict[str, Any]], price_type_id: Optional[int]) -> List[CartLine]:
        lines = []
        for it in self.items:
            prod = products.get(it.product_id)
            price = pricing.line_price(prod, price_type_id, it.unit) if prod else 0.0
            lines.append(CartLine(it, prod, price, round(price * it.quantity, settings.decimals)))
        return lines

    def total_amount(self, products: Dict[int, Dict[str, Any]], price_type_id: Optional[int]) -> float:
        total = sum(line.line_total for line in self.priced_lines(products, price_type_id))
        return round(total, settings.decimals)

    def order_lines(self) -> List[Dict[str, Any]]:
        return [asdict(it) for it in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {"items": self.order_lines(), "delivery_type": self.delivery_type}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Cart":
        if not data:
            return cls()
        items = []
        for raw in data.get("items") or []:
            try:
                item = CartItem(int(raw["product_id"]), int(raw["quantity"]), raw.get("unit", UNIT_PIECE))
            except (KeyError, TypeError, ValueError):
                continue
            if item.quantity > 0 and item.unit in UNITS:
                items.append(item)
        delivery = data.get("delivery_type")
        return cls(items=items, delivery_type=delivery if delivery in DELIVERY_TYPES else DELIVERY_PICKUP)
