"""Game state, turn rules and the command-line front end."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from balik.cards import choose_rank, deal, draw_from_table, new_deck, take_fish

FISH_TO_WIN = 2


class Side(enum.Enum):
    """One of the two players."""

    PLAYER = "player"
    COMPUTER = "computer"

    @property
    def opponent(self) -> Side:
        return Side.COMPUTER if self is Side.PLAYER else Side.PLAYER

    def __str__(self) -> str:
        return self.value


def _empty_hands() -> dict[Side, list[int]]:
    return {side: [] for side in Side}


def _zero_fish() -> dict[Side, int]:
    return {side: 0 for side in Side}


@dataclass
class Game:
    """A game between a player and the computer."""

    rng: random.Random = field(default_factory=random.Random)
    out: Callable[[str], None] = print
    hands: dict[Side, list[int]] = field(default_factory=_empty_hands)
    fish: dict[Side, int] = field(default_factory=_zero_fish)
    table: list[int] = field(default_factory=list)

    def deal(self) -> None:
        """Shuffle a fresh deck and deal both hands; the rest goes to the table."""
        player, computer, table = deal(new_deck(), self.rng)
        self.hands = {Side.PLAYER: player, Side.COMPUTER: computer}
        self.fish = _zero_fish()
        self.table = table
        self.out("Your cards: " + " ".join(map(str, player)))

    def ask(self, asker: Side, target: Side, rank: int) -> int:
        """Move every card of ``rank`` from ``target`` to ``asker``; return how many."""
        source = self.hands[target]
        taken = source.count(rank)
        if taken:
            source[:] = [card for card in source if card != rank]
            self.hands[asker].extend([rank] * taken)
        return taken

    def winner(self) -> Side | None:
        """The side that has made enough fish, or ``None``."""
        for side in Side:
            if self.fish[side] >= FISH_TO_WIN:
                return side
        return None

    def _check_fish(self, side: Side) -> bool:
        rank = take_fish(self.hands[side])
        if rank is None:
            return False
        self.fish[side] += 1
        self.out(f"{side} made a fish of {rank}; fish count: {self.fish[side]}")
        return True

    def _draw(self, side: Side) -> None:
        if draw_from_table(self.table, self.hands[side]) is None:
            self.out("No cards left on the table.")
        self._check_fish(side)

    def _ask_turn(self, asker: Side, rank: int) -> bool:
        """Play one request; return whether ``asker`` goes again."""
        self.out(f"{asker} asks for {rank}")
        taken = self.ask(asker, asker.opponent, rank)
        if taken:
            self.out(f"{asker} took {taken} card(s) of {rank}.")
            self._check_fish(asker)
            return self.winner() is None
        self.out(f"{asker.opponent} has no {rank}. {asker} draws from the table.")
        self._draw(asker)
        return False

    def player_turn(self, choose: Callable[[Game], int]) -> None:
        """Let the player ask, using ``choose(game)``, until a request misses."""
        while self._ask_turn(Side.PLAYER, choose(self)):
            pass

    def computer_turn(self) -> None:
        """Let the computer ask until a request misses."""
        while True:
            hand = self.hands[Side.COMPUTER]
            if not hand:
                self.out("computer has no cards and draws from the table.")
                self._draw(Side.COMPUTER)
                return
            if not self._ask_turn(Side.COMPUTER, choose_rank(hand, self.rng)):
                return

    def play(self, choose: Callable[[Game], int]) -> Side:
        """Deal and alternate turns until someone wins; return the winner."""
        self.deal()
        while (won := self.winner()) is None:
            self.player_turn(choose)
            if self.winner() is not None:
                break
            self.computer_turn()
        won = self.winner()
        self.out(f"{won} wins!")
        return won


def _ask_human(game: Game) -> int:
    hand = game.hands[Side.PLAYER]
    print("Your cards: " + " ".join(map(str, hand)))
    while True:
        answer = input("Which card do you ask for? ").strip()
        try:
            return int(answer)
        except ValueError:
            print("Please enter a number.")


def main(argv: list[str] | None = None) -> int:
    """Run an interactive game on the terminal."""
    parser = argparse.ArgumentParser(prog="balik", description="Play fish against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)

    game = Game(rng=random.Random(args.seed))
    print("The fish game begins.")
    try:
        game.play(_ask_human)
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())