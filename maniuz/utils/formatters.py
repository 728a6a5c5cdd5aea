from maniuz.config import settings


def money(v: float, currency: str | None = None) -> str:
    # 12500.5 -> "12 500.50 UZS"
    return f"{v:,.{settings.decimals}f}".replace(",", " ") + f" {currency or settings.currency}"
