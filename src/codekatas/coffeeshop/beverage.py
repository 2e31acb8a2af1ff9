"""
Beverages sold by the coffee shop.

Coffee drinks form a closed set: Americano, Latte and Macchiato. Tea is a
beverage too, but it is not a coffee drink and is kept out of that set, so a
``match`` over ``CoffeeDrink`` never has to handle it.
"""

from enum import Enum
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field


class DrinkTemperature(str, Enum):
    HOT = "Hot"
    ICED = "Iced"


class FlavorSyrup(str, Enum):
    CARAMEL = "Caramel"
    VANILLA = "Vanilla"
    HAZELNUT = "Hazelnut"
    NONE = "None"


class MilkType(str, Enum):
    WHOLE_MILK = "Whole Milk"
    SKIM_MILK = "Skim Milk"
    ALMOND_MILK = "Almond Milk"
    OAT_MILK = "Oat Milk"


class TeaType(str, Enum):
    MATCHA = "Matcha"
    CHAI = "Chai"
    EARL_GREY = "Earl Grey"
    GREEN = "Green"


# ── Coffee drinks (closed) ───────────────────────────────────────────


class Americano(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["americano"] = "americano"
    temperature: DrinkTemperature = DrinkTemperature.HOT

    def __str__(self) -> str:
        return f"{self.temperature.value} Americano"


class Latte(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["latte"] = "latte"
    flavor_syrup: FlavorSyrup = FlavorSyrup.NONE
    milk_type: MilkType = MilkType.WHOLE_MILK
    extra_shot: bool = False
    temperature: DrinkTemperature = DrinkTemperature.HOT

    def __str__(self) -> str:
        return f"{self.temperature.value} {_flavored('Latte', self.flavor_syrup)} with {self.milk_type.value}"


class Macchiato(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["macchiato"] = "macchiato"
    milk_type: MilkType = MilkType.WHOLE_MILK
    flavor_syrup: FlavorSyrup = FlavorSyrup.NONE
    temperature: DrinkTemperature = DrinkTemperature.HOT

    def __str__(self) -> str:
        return f"{self.temperature.value} {_flavored('Macchiato', self.flavor_syrup)} with {self.milk_type.value}"


COFFEE_DRINK_VARIANTS = (Americano, Latte, Macchiato)

CoffeeDrink = Annotated[Americano | Latte | Macchiato, Field(discriminator="kind")]


# ── Tea (outside the coffee-drink set) ───────────────────────────────


class Tea(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["tea"] = "tea"
    tea_type: TeaType

    def __str__(self) -> str:
        return f"{self.tea_type.value} Tea"


Beverage = Annotated[Americano | Latte | Macchiato | Tea, Field(discriminator="kind")]


def is_beverage(item: object) -> bool:
    return isinstance(item, (*COFFEE_DRINK_VARIANTS, Tea))


def has_milk(drink: Americano | Latte | Macchiato) -> bool:
    """Whether a coffee drink is made with milk."""
    match drink:
        case Americano():
            return False
        case Latte() | Macchiato():
            return True
        case _:
            assert_never(drink)


def _flavored(name: str, syrup: FlavorSyrup) -> str:
    if syrup is FlavorSyrup.NONE:
        return name
    return f"{syrup.value} {name}"
