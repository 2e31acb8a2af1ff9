"""Tests for beverage descriptions, the coffee-drink set and pricing."""

import pytest
from pydantic import TypeAdapter, ValidationError

from codekatas.coffeeshop.beverage import (
    Americano,
    CoffeeDrink,
    DrinkTemperature,
    FlavorSyrup,
    Latte,
    Macchiato,
    MilkType,
    Tea,
    TeaType,
    has_milk,
    is_beverage,
)
from codekatas.coffeeshop.food import Donut, DonutType, is_bakery_item
from codekatas.coffeeshop.pricing import StandardPricingStrategy, format_cents


class TestBeverages:
    def test_descriptions(self, drink_items):
        assert [str(drink) for drink in drink_items] == [
            "Hot Americano",
            "Hot Caramel Latte with Almond Milk",
            "Hot Vanilla Macchiato with Whole Milk",
            "Matcha Tea",
        ]

    def test_unflavored_latte(self):
        latte = Latte(milk_type=MilkType.OAT_MILK, temperature=DrinkTemperature.ICED)

        assert str(latte) == "Iced Latte with Oat Milk"

    def test_tea_is_not_a_coffee_drink(self):
        adapter = TypeAdapter(CoffeeDrink)

        assert isinstance(adapter.validate_python({"kind": "macchiato"}), Macchiato)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "tea", "tea_type": "Matcha"})

    def test_tea_is_still_a_beverage(self):
        tea = Tea(tea_type=TeaType.GREEN)

        assert is_beverage(tea)
        assert not is_bakery_item(tea)

    def test_has_milk(self):
        assert not has_milk(Americano())
        assert has_milk(Latte())
        assert has_milk(Macchiato(flavor_syrup=FlavorSyrup.HAZELNUT))


class TestPricing:
    @pytest.mark.parametrize(
        "item,cents",
        [
            (Donut(donut_type=DonutType.CHOCOLATE), 175),
            (Americano(), 300),
            (Latte(), 450),
            (Latte(extra_shot=True), 525),
            (Macchiato(), 425),
            (Tea(tea_type=TeaType.EARL_GREY), 250),
        ],
    )
    def test_standard_prices(self, item, cents):
        assert StandardPricingStrategy().price_cents(item) == cents

    def test_unknown_item_rejected(self):
        with pytest.raises(AssertionError):
            StandardPricingStrategy().price_cents("espresso")

    @pytest.mark.parametrize("cents,text", [(0, "$0.00"), (5, "$0.05"), (175, "$1.75"), (1200, "$12.00")])
    def test_format_cents(self, cents, text):
        assert format_cents(cents) == text
