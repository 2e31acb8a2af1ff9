"""
CLI demo — prints a sample coffee shop order and a dealt poker hand.

Usage:
    python -m codekatas.demo
    python -m codekatas.demo --customer Ada --log-level DEBUG
    python -m codekatas.demo --seed 7
"""

import argparse
import logging
import random

from codekatas.coffeeshop.order import CoffeeShopOrder, OrderRequest
from codekatas.deckofcards.deck import DeckOfCards

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

SAMPLE_ITEMS = [
    {"kind": "donut", "donut_type": "Glazed"},
    {"kind": "bagel", "bagel_type": "Everything", "spread_type": "Cream Cheese", "toasted": True},
    {"kind": "cookie", "cookie_type": "Chocolate Chip"},
    {"kind": "americano", "temperature": "Hot"},
    {"kind": "latte", "flavor_syrup": "Caramel", "milk_type": "Almond Milk", "temperature": "Hot"},
    {"kind": "macchiato", "milk_type": "Whole Milk", "flavor_syrup": "Vanilla", "temperature": "Hot"},
    {"kind": "tea", "tea_type": "Matcha"},
]


def run_demo(args: argparse.Namespace) -> None:
    logger = logging.getLogger(__name__)

    req = OrderRequest(customer_name=args.customer, items=SAMPLE_ITEMS)
    order = CoffeeShopOrder.from_request(req)
    logger.info("Built order for %s with %d items", req.customer_name, len(req.items))

    print(f"Order for {order.customer_name}")
    print(order.generate_receipt_for_food_items())
    print("Food: " + order.get_food_items_for_order().make_string())
    print("Drinks: " + order.get_drinks_for_order().make_string())

    deck = DeckOfCards()
    shuffled = deck.shuffle(random.Random(args.seed))
    hand, remaining = deck.deal(shuffled, 5)
    logger.info("Dealt a hand, %d cards left in the shoe", len(remaining))
    print("Hand: " + ", ".join(str(card) for card in sorted(hand)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the code kata demos")
    parser.add_argument("--customer", default="Guest", help="Customer name on the order")
    parser.add_argument("--seed", type=int, default=42, help="Seed for shuffling the deck")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    run_demo(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
