from albumshop.config import settings

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


def money(v: float) -> str:
    symbol = CURRENCY_SYMBOLS.get(settings.currency)
    if symbol:
        return f"{symbol}{v:.{settings.decimals}f}"
    return f"{v:.{settings.decimals}f} {settings.currency}"
