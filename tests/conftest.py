"""Pytest configuration and shared fixtures."""

import pytest

from codekatas.coffeeshop.beverage import (
    Americano,
    DrinkTemperature,
    FlavorSyrup,
    Latte,
    Macchiato,
    MilkType,
    Tea,
    TeaType,
)
from codekatas.coffeeshop.food import Bagel, BagelType, Cookie, CookieType, Donut, DonutType, SpreadType
from codekatas.collections.immutable import ImmutableList
from codekatas.deckofcards.deck import DeckOfCards


@pytest.fixture
def one_to_five() -> ImmutableList[int]:
    """The integers 1 through 5, in order."""
    return ImmutableList.of(1, 2, 3, 4, 5)


@pytest.fixture
def food_items() -> list:
    return [
        Donut(donut_type=DonutType.GLAZED),
        Bagel(bagel_type=BagelType.PLAIN, spread_type=SpreadType.BUTTER),
        Cookie(cookie_type=CookieType.CHOCOLATE_CHIP),
    ]


@pytest.fixture
def drink_items() -> list:
    return [
        Americano(temperature=DrinkTemperature.HOT),
        Latte(flavor_syrup=FlavorSyrup.CARAMEL, milk_type=MilkType.ALMOND_MILK, temperature=DrinkTemperature.HOT),
        Macchiato(milk_type=MilkType.WHOLE_MILK, flavor_syrup=FlavorSyrup.VANILLA, temperature=DrinkTemperature.HOT),
        Tea(tea_type=TeaType.MATCHA),
    ]


@pytest.fixture
def deck() -> DeckOfCards:
    return DeckOfCards()
