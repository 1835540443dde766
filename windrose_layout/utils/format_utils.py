"""Formatting helpers for labels and tooltips."""


def format_number(value: float) -> str:
    """Format a number the way it reads in a tooltip: 12.0 -> '12', 2.5 -> '2.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
