from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from maniuz.constants import DEFAULT_ITEMS_PER_BOX, SETTING_DEFAULT_PRICE_TYPE
from maniuz.db import sqlite as db

logger = logging.getLogger(__name__)

DEMO_PRICE_TYPES = [
    ("Perakende", "Normal perakende satış fiyatı"),
    ("Toptan", "Toptan satış fiyatı"),
    ("VIP", "VIP müşteriler için özel fiyat"),
]

# name, description, image, stock, (retail, wholesale, vip)
DEMO_PRODUCTS = [
    ("Coca-Cola 330ml", "Klasik Coca-Cola kutu içecek",
     "https://images.unsplash.com/photo-1554866585-cd94860890b7?w=400", 100, (8.50, 7.00, 6.50)),
    ("Red Bull Energy Drink 250ml", "Red Bull enerji içeceği",
     "https://images.unsplash.com/photo-1622543925917-763c34c1a86e?w=400", 50, (25.00, 22.00, 20.00)),
    ("Monster Energy 500ml", "Monster enerji içeceği",
     "https://images.unsplash.com/photo-1592838064575-70ed626d3a0e?w=400", 75, (30.00, 26.00, 24.00)),
    ("Fanta Portakal 330ml", "Portakallı gazlı içecek", "", 120, (8.00, 6.50, 6.00)),
    ("Sprite 330ml", "Limon aromalı gazlı içecek", "", 100, (8.00, 6.50, 6.00)),
    ("Ice Tea Şeftali 330ml", "Şeftali aromalı soğuk çay", "", 80, (10.00, 8.50, 8.00)),
]


def seed_database() -> Tuple[bool, Dict[str, Any]]:
    """Demo price types and products; does nothing when tiers already exist."""
    if db.list_price_types():
        logger.info("Database already seeded. Skipping...")
        return False, {"message": "Database already contains data"}

    pt_ids = []
    for name, description in DEMO_PRICE_TYPES:
        pt_ids.append(db.add_price_type(name, description))
        logger.info("price type added: %s", name)
    db.set_setting(SETTING_DEFAULT_PRICE_TYPE, pt_ids[0])

    product_ids = []
    for name, description, image, stock, prices in DEMO_PRODUCTS:
        product_ids.append(
            db.add_product(
                name=name,
                description=description,
                image_url=image,
                stock=stock,
                items_per_box=DEFAULT_ITEMS_PER_BOX,
                prices=dict(zip(pt_ids, prices)),
            )
        )
        logger.info("product added: %s", name)

    return True, {"price_types": len(pt_ids), "products": len(product_ids)}
