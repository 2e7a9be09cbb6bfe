import numpy as np

from ..primitives import combinations
from .base import PositionMatch, PositionRound, UnsupportedRoster

# Whist design on 8 positions: every pair partners exactly once and faces each other exactly twice.
# Position 0 is fixed, every other position i becomes i % 7 + 1 in the next round.
EIGHT_PLAYER_ROUNDS: tuple[tuple[PositionMatch, PositionMatch], ...] = (
    (((0, 1), (2, 4)), ((3, 7), (5, 6))),
    (((0, 2), (3, 5)), ((4, 1), (6, 7))),
    (((0, 3), (4, 6)), ((5, 2), (7, 1))),
    (((0, 4), (5, 7)), ((6, 3), (1, 2))),
    (((0, 5), (6, 1)), ((7, 4), (2, 3))),
    (((0, 6), (7, 2)), ((1, 5), (3, 4))),
    (((0, 7), (1, 3)), ((2, 6), (4, 5))),
)

LARGE_GROUP_ROUND_CAP = 14


def four_player_rounds() -> list[PositionRound]:
    """The three ways of splitting four players into two teams, one match per round."""
    teams = combinations(range(4), 2)
    rounds: list[PositionRound] = []
    for i, team1 in enumerate(teams):
        for team2 in teams[i + 1:]:
            if not set(team1) & set(team2):
                rounds.append([(team1, team2)])
    return rounds


def eight_player_rounds() -> list[PositionRound]:
    return [list(r) for r in EIGHT_PLAYER_ROUNDS]


def large_group_rounds(n: int, offset: int, round_cap: int = LARGE_GROUP_ROUND_CAP) -> list[PositionRound]:
    """Rotate the positions by one each round and cut them into groups of four.

    This spreads players around, but unlike the 4 and 8 player designs it makes no promise that all partnerships are
    used before one repeats.

    :param n:           Number of positions, a multiple of 4 (12 or more).
    :param offset:      Rotation applied on top of the round index, usually random.
    :param round_cap:   Upper bound on the number of rounds, which is `min(n - 1, round_cap)`.
    """
    positions = list(range(n))
    rounds: list[PositionRound] = []
    for r in range(min(n - 1, round_cap)):
        shift = (r + offset) % n
        rotated = positions[shift:] + positions[:shift]
        used: set[int] = set()
        matches: PositionRound = []
        for i in range(0, n - 3, 4):
            team1, team2 = tuple(rotated[i:i + 2]), tuple(rotated[i + 2:i + 4])
            if used.isdisjoint(team1 + team2):
                matches.append((team1, team2))
                used.update(team1 + team2)
        if matches:
            rounds.append(matches)
    return rounds


def doubles_rounds(n: int, rng: np.random.Generator, round_cap: int = LARGE_GROUP_ROUND_CAP) -> list[PositionRound]:
    """Doubles rotation for `n` positions, where `n` must be a positive multiple of 4."""
    if n < 4 or n % 4 != 0:
        raise UnsupportedRoster(f"doubles rotation requires a multiple of 4 players, got {n}")
    match n:
        case 4:
            return four_player_rounds()
        case 8:
            return eight_player_rounds()
        case _:
            return large_group_rounds(n, offset=int(rng.integers(0, n)), round_cap=round_cap)
