"""Deck handling and hand rules for the fish card game."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import MutableSequence

RANKS = range(1, 7)
COPIES_PER_RANK = 4
DECK_SIZE = len(RANKS) * COPIES_PER_RANK
HAND_SIZE = 6
FISH_SIZE = 4


def new_deck() -> list[int]:
    """Return an unshuffled deck: four copies of each rank, in rank order."""
    return [rank for rank in RANKS for _ in range(COPIES_PER_RANK)]


def shuffle(cards: MutableSequence[int], rng: random.Random) -> None:
    """Shuffle ``cards`` in place, walking from the last position down."""
    for i in reversed(range(1, len(cards))):
        j = rng.randrange(i + 1)
        cards[i], cards[j] = cards[j], cards[i]


def deal(
    deck: list[int], rng: random.Random
) -> tuple[list[int], list[int], list[int]]:
    """Shuffle a copy of ``deck`` and deal it out.

    Cards go alternately to the player and the computer until each holds
    ``HAND_SIZE`` cards; the rest stay on the table in order.
    Returns ``(player_hand, computer_hand, table)``.
    """
    cards = list(deck)
    shuffle(cards, rng)
    dealt = cards[: HAND_SIZE * 2]
    return dealt[0::2], dealt[1::2], cards[HAND_SIZE * 2 :]


def take_fish(hand: list[int]) -> int | None:
    """Remove the first completed set of four from ``hand``.

    The hand is scanned in order and the first rank whose count reaches
    four is removed entirely. Returns that rank, or ``None`` if no rank
    has four cards.
    """
    counts: Counter[int] = Counter()
    for card in hand:
        counts[card] += 1
        if counts[card] == FISH_SIZE:
            hand[:] = [c for c in hand if c != card]
            return card
    return None


def draw_from_table(table: list[int], hand: list[int]) -> int | None:
    """Move the top card of ``table`` into ``hand``; ``None`` if the table is empty."""
    if not table:
        return None
    card = table.pop(0)
    hand.append(card)
    return card


def choose_rank(hand: list[int], rng: random.Random) -> int:
    """Pick the rank to ask for.

    The most frequent rank wins, the lowest on a tie. If no rank occurs
    more than once, a random card from the hand is chosen instead.
    """
    if not hand:
        raise ValueError("cannot choose a rank from an empty hand")
    counts = Counter(hand)
    best_rank, best_count = None, 0
    for rank in sorted(counts):
        if counts[rank] > best_count:
            best_rank, best_count = rank, counts[rank]
    if best_count <= 1:
        return hand[rng.randrange(len(hand))]
    return best_rank