"""Bet scoring against a race result.

A predicted driver in the right podium spot earns ``EXACT`` points, one who
made the podium in another spot earns ``PODIUM``. Calling all three spots
right adds ``PERFECT_BONUS``.
"""

from __future__ import annotations

from collections.abc import Iterable

from paddock.models.bet import Bet
from paddock.models.results import RaceResults

EXACT = 5
PODIUM = 3
PERFECT_BONUS = 10


def podium(results: RaceResults) -> tuple[str, str, str]:
    """Driver codes classified first, second and third; ``""`` for an unfilled spot."""
    by_position = {row.entry.position: row.entry.driver for row in results.rows}
    first, second, third = (by_position.get(p, "") for p in ("1", "2", "3"))
    return (first, second, third)


def score_bet(bet: Bet, results: RaceResults) -> int:
    """Points a bet earns for ``results``. Driver codes compare case-insensitively."""
    actual = [code.lower() for code in podium(results)]
    score = 0
    for predicted, finished in zip(bet.podium, actual):
        predicted = predicted.lower()
        if not predicted:
            continue
        if predicted == finished:
            score += EXACT
        elif predicted in actual:
            score += PODIUM
    if score == 3 * EXACT:
        score += PERFECT_BONUS
    return score


def score_bets(bets: Iterable[Bet], results: RaceResults) -> list[Bet]:
    """Copies of the bets placed on ``results.race_name`` with ``points`` filled in.

    Bets on other races are left out. Nothing is written back to disk.
    """
    race = results.race_name.lower()
    return [
        bet.model_copy(update={"points": score_bet(bet, results)})
        for bet in bets
        if bet.race.lower() == race
    ]
