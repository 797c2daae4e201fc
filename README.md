# balik

Balik is a card game for the terminal, played against the computer. It is a
small variant of Go Fish.

## Rules

- The deck has 24 cards: four each of the ranks 1 to 6.
- It is shuffled, then six cards go to you and six to the computer, one card
  at a time. The rest stay on the table, in order.
- On your turn you name a rank. If the computer holds cards of that rank, it
  hands all of them over and you ask again. If it holds none, you draw the top
  card from the table and the turn passes.
- Whoever holds all four cards of one rank has made a "fish" (balik). Those
  four cards leave the hand. This is checked after cards are taken and after
  a card is drawn.
- The computer asks for the rank it holds the most of, the lowest rank on a
  tie. If it holds no more than one card of any rank, it picks a card from its
  hand at random. With an empty hand it draws from the table instead.
- The first side to make two fish wins.

## Installing

```
pip install .
```

## Playing

```
balik
balik --seed 42
```

The game shows your hand and asks which rank you want. Type a number and
press Enter; anything that is not a number is asked for again. The computer's
hand stays hidden. `--seed` fixes the shuffle so a game can be replayed.
Ending input (Ctrl-D) or pressing Ctrl-C abandons the game.

## Using it from Python

`balik.game` holds the `Game` dataclass and the `Side` enum
(`Side.PLAYER`, `Side.COMPUTER`). `Game.play` deals a fresh deck and runs the
game to the end. It takes a function that is given the game and returns the
rank the player asks for, and it returns the winning side:

```python
import random

from balik.game import Game, Side

rng = random.Random(1)
game = Game(rng=rng, out=lambda line: None)
winner = game.play(lambda g: rng.choice(g.hands[Side.PLAYER] or [1]))
print(winner, game.fish)
```

A game's state is in `hands`, `fish` and `table`. The steps can also be run
one at a time with `deal`, `ask`, `player_turn`, `computer_turn` and
`winner`. Messages go through `out`, which is `print` by default.

`balik.cards` holds the helpers on their own: `new_deck`, `shuffle`, `deal`,
`take_fish`, `draw_from_table` and `choose_rank`.

## Running the tests

```
pip install .[test]
pytest
```