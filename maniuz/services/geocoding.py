from __future__ import annotations

import logging
from typing import Optional

import httpx

from maniuz.config import settings
from maniuz.constants import YANDEX_LANGS

logger = logging.getLogger(__name__)

GEOCODER_URL = "https://geocode-maps.yandex.ru/1.x/"


def _extract_address(data: dict) -> Optional[str]:
    try:
        geo_object = data["response"]["GeoObjectCollection"]["featureMember"][0]["GeoObject"]
    except (KeyError, IndexError, TypeError):
        logger.warning("No geocoding results found")
        return None
    address = (
        geo_object.get("metaDataProperty", {})
        .get("GeocoderMetaData", {})
        .get("Address", {})
        .get("formatted")
    )
    return address or None


async def reverse_geocode(
    lat: float,
    lng: float,
    language: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[str]:
    """Coordinates -> human-readable address, or None."""
    if not settings.yandex_maps_api_key:
        logger.warning("YANDEX_MAPS_API_KEY is empty, geocoding skipped")
        return None

    params = {
        "apikey": settings.yandex_maps_api_key,
        "geocode": f"{lng},{lat}",  # Yandex ждёт lng,lat
        "format": "json",
        "lang": YANDEX_LANGS.get(language, "uz_UZ"),
    }
    own_client = client is None
    client = client or httpx.AsyncClient(timeout=10.0)
    try:
        resp = await client.get(GEOCODER_URL, params=params)
        if resp.status_code != 200:
            logger.error("Geocoding API error: %s", resp.status_code)
            return None
        return _extract_address(resp.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Geocoding error: %s", e)
        return None
    finally:
        if own_client:
            await client.aclose()
