from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from json import JSONEncoder


class CustomJSONEncoder(JSONEncoder):
    def default(self, o):
        try:
            return str(o)
        except Exception:
            return super().default(o)


def quantize_money(value: Decimal, precision: int = 2) -> Decimal:
    """Rounds monetary value half-up to the given amount of decimal places"""
    return value.quantize(Decimal(1).scaleb(-precision), ROUND_HALF_UP)


def money_formatter(symbol: str, precision: int = 2) -> Callable[[Decimal], str]:
    def format_money(value: Decimal) -> str:
        return f"{symbol}{quantize_money(value, precision):.{precision}f}"

    return format_money
