"""
A customer's coffee shop order and the text produced from it.

``OrderRequest`` is the validated input: pydantic resolves each item to its
variant through the ``kind`` tag, so orders can be built from plain dicts.
``CoffeeShopOrder`` holds the items in an ``ImmutableList`` and derives
receipts and item descriptions by chaining filter / map over it.
"""

import logging
from typing import Annotated, Iterable, assert_never

from pydantic import BaseModel, Field

from codekatas.coffeeshop.beverage import Americano, Latte, Macchiato, Tea, is_beverage
from codekatas.coffeeshop.food import Bagel, Cookie, Donut, is_bakery_item
from codekatas.coffeeshop.pricing import Item, PricingStrategy, StandardPricingStrategy, format_cents
from codekatas.collections.immutable import ImmutableList

logger = logging.getLogger(__name__)

TaggedItem = Annotated[Donut | Bagel | Cookie | Americano | Latte | Macchiato | Tea, Field(discriminator="kind")]


class OrderRequest(BaseModel):
    """Input for building a ``CoffeeShopOrder``."""

    customer_name: str = Field(..., min_length=1)
    items: list[TaggedItem] = Field(default_factory=list)


class CoffeeShopOrder:
    """A customer's items, priced by a pluggable ``PricingStrategy``."""

    def __init__(
        self,
        customer_name: str,
        order_items: Iterable[Item],
        pricing: PricingStrategy | None = None,
    ) -> None:
        self.customer_name = customer_name
        self.order_items: ImmutableList[Item] = ImmutableList(order_items)
        self.pricing: PricingStrategy = pricing or StandardPricingStrategy()

    @classmethod
    def from_request(cls, req: OrderRequest, pricing: PricingStrategy | None = None) -> "CoffeeShopOrder":
        return cls(req.customer_name, req.items, pricing)

    def food_items(self) -> ImmutableList[Donut | Bagel | Cookie]:
        return self.order_items.filter(is_bakery_item)

    def beverages(self) -> ImmutableList[Americano | Latte | Macchiato | Tea]:
        return self.order_items.filter(is_beverage)

    def total_cents(self) -> int:
        return self.order_items.sum_of(self.pricing.price_cents)

    def generate_receipt_for_food_items(self) -> str:
        """Receipt for the bakery items only.

        One line per item, ``"<Kind>: <type> $<price>"``, followed by
        ``"Total: $<total>"``. Beverages are left off.
        """
        food = self.food_items().peek(
            lambda item: logger.debug("Pricing %s for %s", item.kind, self.customer_name)
        )
        lines = food.map(self._food_receipt_line)
        total = food.sum_of(self.pricing.price_cents)
        return "".join(lines) + f"Total: {format_cents(total)}"

    def get_food_items_for_order(self) -> ImmutableList[str]:
        """Short descriptions of the bakery items, e.g. "Plain bagel with Butter"."""
        return self.food_items().map(describe_food)

    def get_drinks_for_order(self) -> ImmutableList[str]:
        """Descriptions of the beverages, e.g. "Hot Caramel Latte with Almond Milk"."""
        return self.beverages().map(str)

    def _food_receipt_line(self, item: Donut | Bagel | Cookie) -> str:
        price = format_cents(self.pricing.price_cents(item))
        match item:
            case Donut(donut_type=donut_type):
                return f"Donut: {donut_type.value} {price}\n"
            case Bagel(bagel_type=bagel_type):
                return f"Bagel: {bagel_type.value} {price}\n"
            case Cookie(cookie_type=cookie_type):
                return f"Cookie: {cookie_type.value} {price}\n"
            case _:
                assert_never(item)


def describe_food(item: Donut | Bagel | Cookie) -> str:
    match item:
        case Bagel(bagel_type=bagel_type, spread_type=spread_type):
            return f"{bagel_type.value} bagel with {spread_type.value}"
        case Cookie(cookie_type=cookie_type):
            return f"{cookie_type.value} cookie"
        case Donut(donut_type=donut_type):
            return f"{donut_type.value} donut"
        case _:
            assert_never(item)
