import re
from typing import Optional, Tuple

from maniuz.constants import NICKNAME_MAX_LENGTH, NICKNAME_MIN_LENGTH

PHONE_RE = re.compile(r"^\+998[0-9]{9}$")
NICKNAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")


def require_positive_number(v: float, name: str = "value") -> None:
    if v <= 0:
        raise ValueError(f"{name} must be > 0")


def validate_phone(phone: str) -> bool:
    """Uzbek numbers only: +998 and nine digits."""
    return bool(PHONE_RE.match(phone or ""))


def format_phone_input(text: str) -> str:
    cleaned = re.sub(r"[^\d+]", "", text or "")
    if not cleaned.startswith("+998"):
        cleaned = "+998" + re.sub(r"^\+?(998)?", "", cleaned).replace("+", "")
    return cleaned[:13]


def validate_nickname(nickname: str) -> Tuple[bool, Optional[str]]:
    if len(nickname) < NICKNAME_MIN_LENGTH:
        return False, "nickname_too_short"
    if len(nickname) > NICKNAME_MAX_LENGTH:
        return False, "nickname_too_long"
    if not NICKNAME_RE.match(nickname):
        return False, "nickname_invalid_format"
    return True, None
