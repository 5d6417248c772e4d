"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

BASE_PAY = Decimal("100")
REGULAR_HOURS_CAP = Decimal("40")
MONEY_QUANT = Decimal("0.01")
DEFAULT_CURRENCY = "USD"
