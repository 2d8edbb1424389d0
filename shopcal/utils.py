"""Shared formatting helpers used across the dashboard services."""

import re


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("555-123-4567")
        '5551234567'
        >>> normalize_phone("+1 (555) 123-4567")
        '+15551234567'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount with thousands separators and two decimals.

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
    """
    return f"{symbol}{amount:,.2f}"


def format_compact(num: float) -> str:
    """Abbreviate large numbers with a k/m suffix.

    Examples:
        >>> format_compact(1500)
        '1.5k'
        >>> format_compact(999)
        '999'
    """
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}m"
    if num >= 1000:
        return f"{num / 1000:.1f}k"
    if float(num).is_integer():
        return str(int(num))
    return str(num)
