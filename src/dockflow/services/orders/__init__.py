"""Order financial helpers."""

from .discounts import authorize, first_unauthorized
from .numbering import OrderNumberGenerator
from .service import create_order
from .totals import compute_totals, quantize_money

__all__ = [
    "authorize",
    "first_unauthorized",
    "compute_totals",
    "quantize_money",
    "create_order",
    "OrderNumberGenerator",
]
