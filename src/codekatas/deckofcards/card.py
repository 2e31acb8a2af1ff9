"""Playing card model."""

from enum import Enum, IntEnum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict


class Suit(str, Enum):
    SPADES = "Spades"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    CLUBS = "Clubs"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


_SUIT_ORDER = {suit: position for position, suit in enumerate(Suit)}


@total_ordering
class Card(BaseModel):
    """A card, ordered by suit (Spades, Diamonds, Hearts, Clubs) then rank."""

    model_config = ConfigDict(frozen=True)

    rank: Rank
    suit: Suit

    def _sort_key(self) -> tuple[int, int]:
        return _SUIT_ORDER[self.suit], int(self.rank)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.rank.display_name} of {self.suit.value}"
