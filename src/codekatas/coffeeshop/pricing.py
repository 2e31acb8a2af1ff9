"""
Pricing strategies (Strategy pattern).

An order holds a reference to a ``PricingStrategy`` (a Protocol) and calls
``price_cents()`` per item. To add a new pricing scheme (e.g. happy-hour
discounts), implement the protocol and pass it to the order.

Prices are integer cents; ``format_cents`` renders them for receipts.
"""

from typing import Protocol, assert_never

from codekatas.coffeeshop.beverage import Americano, Latte, Macchiato, Tea
from codekatas.coffeeshop.food import Bagel, Cookie, Donut

Item = Donut | Bagel | Cookie | Americano | Latte | Macchiato | Tea


class PricingStrategy(Protocol):
    """Interface for pricing a single item.

    Any class with a ``price_cents(item) -> int`` method satisfies this
    protocol (structural subtyping, no explicit inheritance needed).
    """

    def price_cents(self, item: Item) -> int: ...


class StandardPricingStrategy:
    """Default menu prices plus surcharges for extras.

    Examples:
        - Glazed donut:          175 cents ($1.75)
        - Toasted plain bagel:   250 + 50 = 300 cents ($3.00)
        - Latte with extra shot: 450 + 75 = 525 cents ($5.25)
    """

    DONUT_CENTS: int = 175
    BAGEL_CENTS: int = 250
    COOKIE_CENTS: int = 125
    AMERICANO_CENTS: int = 300
    LATTE_CENTS: int = 450
    MACCHIATO_CENTS: int = 425
    TEA_CENTS: int = 250

    TOASTED_SURCHARGE_CENTS: int = 50
    WARMED_SURCHARGE_CENTS: int = 25
    EXTRA_SHOT_SURCHARGE_CENTS: int = 75

    def price_cents(self, item: Item) -> int:
        match item:
            case Donut():
                return self.DONUT_CENTS
            case Bagel(toasted=toasted):
                return self.BAGEL_CENTS + (self.TOASTED_SURCHARGE_CENTS if toasted else 0)
            case Cookie(warmed=warmed):
                return self.COOKIE_CENTS + (self.WARMED_SURCHARGE_CENTS if warmed else 0)
            case Americano():
                return self.AMERICANO_CENTS
            case Latte(extra_shot=extra_shot):
                return self.LATTE_CENTS + (self.EXTRA_SHOT_SURCHARGE_CENTS if extra_shot else 0)
            case Macchiato():
                return self.MACCHIATO_CENTS
            case Tea():
                return self.TEA_CENTS
            case _:
                assert_never(item)


def format_cents(cents: int) -> str:
    """Render a cent amount as dollars, e.g. 175 -> "$1.75"."""
    return f"${cents // 100}.{cents % 100:02d}"
