"""
A standard 52-card deck built on the rich collections.

The deck itself never changes: shuffling and dealing return new containers,
and dealing hands back the cards that are left rather than popping them off
a shared stack.
"""

import logging
import random

from codekatas.collections.immutable import ImmutableList, ImmutableSet
from codekatas.deckofcards.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class DeckOfCards:
    def __init__(self) -> None:
        self.cards: ImmutableList[Card] = ImmutableList(Suit).flat_map(
            lambda suit: ImmutableList(Rank).map(lambda rank: Card(rank=rank, suit=suit))
        )
        self.cards_by_suit: dict[Suit, ImmutableList[Card]] = self.cards.group_by(lambda card: card.suit)

    def get_cards_by_suit(self, suit: Suit) -> ImmutableList[Card]:
        return self.cards_by_suit[suit]

    def diamonds(self) -> ImmutableList[Card]:
        return self.get_cards_by_suit(Suit.DIAMONDS)

    def hearts(self) -> ImmutableList[Card]:
        return self.get_cards_by_suit(Suit.HEARTS)

    def spades(self) -> ImmutableList[Card]:
        return self.get_cards_by_suit(Suit.SPADES)

    def clubs(self) -> ImmutableList[Card]:
        return self.get_cards_by_suit(Suit.CLUBS)

    def count_by_suit(self) -> dict[Suit, int]:
        return self.cards.count_by(lambda card: card.suit)

    def count_by_rank(self) -> dict[Rank, int]:
        return self.cards.count_by(lambda card: card.rank)

    def shuffle(self, rng: random.Random) -> ImmutableList[Card]:
        """A shuffled copy of the deck; pass a seeded ``Random`` for repeatable order."""
        shuffled = self.cards.to_list()
        rng.shuffle(shuffled)
        return ImmutableList(shuffled)

    def deal(self, cards: ImmutableList[Card], count: int) -> tuple[ImmutableSet[Card], ImmutableList[Card]]:
        """Deal ``count`` cards off the top: returns ``(hand, remaining)``."""
        if count > len(cards):
            raise ValueError(f"Cannot deal {count} cards from {len(cards)} remaining")
        hand = ImmutableSet(cards.take(count))
        logger.debug("Dealt %d cards, %d remaining", count, len(cards) - count)
        return hand, cards.drop(count)

    def deal_hands(
        self, cards: ImmutableList[Card], hands: int, cards_per_hand: int
    ) -> tuple[ImmutableList[ImmutableSet[Card]], ImmutableList[Card]]:
        """Deal ``hands`` hands of ``cards_per_hand`` each, one hand at a time."""
        if hands < 0:
            raise ValueError(f"hands must be >= 0, got {hands}")
        dealt = []
        remaining = cards
        for _ in range(hands):
            hand, remaining = self.deal(remaining, cards_per_hand)
            dealt.append(hand)
        return ImmutableList(dealt), remaining
