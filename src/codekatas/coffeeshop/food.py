"""
Bakery items sold by the coffee shop.

The bakery is a closed set of variants: Donut, Bagel and Cookie. Each model
carries a literal ``kind`` tag so that pydantic can resolve the right
variant from plain data, and callers destructure items with ``match``.

Enums inherit from (str, Enum) so they serialize as plain strings and read
naturally in receipts (e.g. "Glazed" instead of "DonutType.GLAZED").
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class DonutType(str, Enum):
    GLAZED = "Glazed"
    BOSTON_CREAM = "Boston Cream"
    JELLY = "Jelly"
    CHOCOLATE = "Chocolate"


class BagelType(str, Enum):
    PLAIN = "Plain"
    EVERYTHING = "Everything"
    SESAME = "Sesame"
    CINNAMON_RAISIN = "Cinnamon Raisin"


class SpreadType(str, Enum):
    BUTTER = "Butter"
    CREAM_CHEESE = "Cream Cheese"
    HERB_GARLIC_CREAM_CHEESE = "Herb Garlic Cream Cheese"
    JAM = "Jam"


class CookieType(str, Enum):
    CHOCOLATE_CHIP = "Chocolate Chip"
    OATMEAL_RAISIN = "Oatmeal Raisin"
    SUGAR = "Sugar"


# ── Variants ─────────────────────────────────────────────────────────


class Donut(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["donut"] = "donut"
    donut_type: DonutType


class Bagel(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bagel"] = "bagel"
    bagel_type: BagelType
    spread_type: SpreadType
    toasted: bool = False


class Cookie(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["cookie"] = "cookie"
    cookie_type: CookieType
    warmed: bool = False


BAKERY_VARIANTS = (Donut, Bagel, Cookie)

BakeryItem = Annotated[Donut | Bagel | Cookie, Field(discriminator="kind")]


def is_bakery_item(item: object) -> bool:
    return isinstance(item, BAKERY_VARIANTS)
