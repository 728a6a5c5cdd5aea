LANGUAGES = {
    "uz": "O'zbekcha",
    "tr": "Türkçe",
    "ru": "Русский",
}
DEFAULT_LANGUAGE = "uz"
LANGUAGE_COOKIE = "maniuz_language"

ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"
ROLES = (ROLE_ADMIN, ROLE_CUSTOMER)

# порядок важен: так идёт заказ от оформления до выдачи
ORDER_STATUSES = ("pending", "preparing", "delivering", "completed")

DELIVERY_PICKUP = "pickup"
DELIVERY_DELIVERY = "delivery"
DELIVERY_TYPES = (DELIVERY_PICKUP, DELIVERY_DELIVERY)

UNIT_PIECE = "piece"
UNIT_BOX = "box"
UNITS = (UNIT_PIECE, UNIT_BOX)
DEFAULT_ITEMS_PER_BOX = 24

PARTNERSHIP_STATUSES = ("pending", "contacted", "approved", "rejected")
CONTACT_STATUSES = ("unread", "read")

# settings table keys
SETTING_DEFAULT_PRICE_TYPE = "general.default_price_type_id"
SETTING_TEST_MODE = "site.test_mode"
SETTING_STORE_LOCATION = "site.store_location"

DEFAULT_STORE_LAT = 41.550151
DEFAULT_STORE_LNG = 60.627490

YANDEX_LANGS = {
    "uz": "uz_UZ",
    "tr": "tr_TR",
    "ru": "ru_RU",
}

PASSWORD_MIN_LENGTH = 6
NICKNAME_MIN_LENGTH = 3
NICKNAME_MAX_LENGTH = 20
