from __future__ import annotations

from typing import Any, Dict, Optional

from maniuz.config import settings
from maniuz.constants import DEFAULT_ITEMS_PER_BOX, UNIT_BOX, UNIT_PIECE, UNITS


def items_per_box(product: Dict[str, Any]) -> int:
    v = product.get("items_per_box")
    return int(v) if v and int(v) > 0 else DEFAULT_ITEMS_PER_BOX


def unit_price(product: Dict[str, Any], price_type_id: Optional[int]) -> float:
    # нет цены для типа -> 0, как в витрине
    if price_type_id is None:
        return 0.0
    return float(product.get("prices", {}).get(int(price_type_id)) or 0.0)


def box_price(product: Dict[str, Any], price_type_id: Optional[int]) -> float:
    if price_type_id is not None:
        explicit = product.get("box_prices", {}).get(int(price_type_id))
        if explicit is not None:
            return float(explicit)
    return round(unit_price(product, price_type_id) * items_per_box(product), settings.decimals)


def line_price(product: Dict[str, Any], price_type_id: Optional[int], unit: str = UNIT_PIECE) -> float:
    if unit not in UNITS:
        raise ValueError(f"unknown unit: {unit}")
    if unit == UNIT_BOX:
        return box_price(product, price_type_id)
    return unit_price(product, price_type_id)


def pieces(quantity: int, unit: str, per_box: int) -> int:
    return quantity * per_box if unit == UNIT_BOX else quantity


def resolve_price_type_id(
    customer: Optional[Dict[str, Any]],
    known_ids: list[int],
    default_id: Optional[int] = None,
) -> Optional[int]:
    """Customer's own tier, then the configured default, then the first tier."""
    if customer and customer.get("price_type_id") in known_ids:
        return int(customer["price_type_id"])
    if default_id in known_ids:
        return int(default_id)
    return known_ids[0] if known_ids else None
