from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, Optional

import bcrypt

from maniuz.config import settings
from maniuz.constants import (
    NICKNAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    ROLE_ADMIN,
    ROLE_CUSTOMER,
    ROLES,
    SETTING_DEFAULT_PRICE_TYPE,
)
from maniuz.db import sqlite as db
from maniuz.services import pricing
from maniuz.utils.validators import format_phone_input, validate_nickname, validate_phone

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Account flow failure; ``code`` is a translation key."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def default_price_type_id() -> Optional[int]:
    known = [pt["id"] for pt in db.list_price_types()]
    return pricing.resolve_price_type_id(None, known, db.get_setting(SETTING_DEFAULT_PRICE_TYPE))


def customer_price_type_id(customer: Optional[Dict[str, Any]]) -> Optional[int]:
    known = [pt["id"] for pt in db.list_price_types()]
    return pricing.resolve_price_type_id(customer, known, db.get_setting(SETTING_DEFAULT_PRICE_TYPE))


def sign_up(
    email: str,
    password: str,
    confirm_password: str,
    name: str,
    nickname: Optional[str] = None,
    phone: Optional[str] = None,
) -> Dict[str, Any]:
    email = (email or "").strip()
    name = (name or "").strip()
    nickname = (nickname or "").strip() or None
    phone = format_phone_input(phone) if (phone or "").strip() else None

    if not email or "@" not in email:
        raise AuthError("validation_email")
    if not name:
        raise AuthError("validation_name")
    if password != confirm_password:
        raise AuthError("validation_password_mismatch")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise AuthError("validation_password_length")
    if nickname:
        ok, err = validate_nickname(nickname)
        if not ok:
            raise AuthError(err)
        if db.nickname_exists(nickname):
            raise AuthError("nickname_taken")
    if phone and not validate_phone(phone):
        raise AuthError("validation_phone")
    if db.get_customer_by_email(email):
        raise AuthError("email_taken")

    role = ROLE_ADMIN if email.lower() == settings.admin_email else ROLE_CUSTOMER
    try:
        customer_id = db.add_customer(
            email=email,
            name=name,
            password_hash=hash_password(password),
            price_type_id=default_price_type_id(),
            role=role,
            nickname=nickname,
            phone=phone,
        )
    except sqlite3.IntegrityError as e:
        # гонка двух регистраций с одним email/ником
        if "customers.nickname" in str(e):
            raise AuthError("nickname_taken") from None
        raise AuthError("email_taken") from None

    logger.info("customer #%s registered role=%s", customer_id, role)
    return db.get_customer(customer_id)


def sign_in(email: str, password: str) -> Dict[str, Any]:
    customer = db.get_customer_by_email(email or "")
    if not customer or not check_password(password or "", customer["password_hash"]):
        raise AuthError("login_error")
    return customer


def check_nickname(nickname: str) -> Dict[str, Any]:
    nickname = (nickname or "").strip()
    if len(nickname) < NICKNAME_MIN_LENGTH:
        return {"available": None}
    ok, err = validate_nickname(nickname)
    if not ok:
        return {"available": False, "error": err}
    try:
        return {"available": not db.nickname_exists(nickname)}
    except sqlite3.Error:
        logger.exception("nickname check failed")
        return {"available": None, "error": "error_checking_nickname"}


def change_customer_access(
    actor: Optional[Dict[str, Any]],
    customer_id: int,
    price_type_id: Optional[int],
    role: str,
) -> bool:
    if not actor or actor.get("role") != ROLE_ADMIN:
        raise AuthError("admin_only_feature")
    if role not in ROLES:
        raise AuthError("error_updating_customer")
    if price_type_id is not None and db.get_price_type(price_type_id) is None:
        raise AuthError("error_updating_customer")
    return db.update_customer_access(customer_id, price_type_id, role)
