"""Display formatting shared by the composer and the page templates."""

DEFAULT_CURRENCY = "$"


def format_amount(value: float | int | None, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format a money amount for display.

    Whole amounts drop the cents ("$1,500"), others keep two decimals.
    None renders as an empty string.
    """
    if value is None:
        return ""
    amount = float(value)
    if amount.is_integer():
        return f"{currency}{amount:,.0f}"
    return f"{currency}{amount:,.2f}"
