"""Statistics over generated rounds, and checks that a schedule holds up to its promises."""
from typing import Iterable, Literal, Sequence
import numpy as np
import pandas as pd
from scipy.special import comb

from .models import Format, Round, check_format

Role = Literal['partners', 'opponents']


def _index(roster: Sequence[str]) -> dict[str, int]:
    return {p: i for i, p in enumerate(roster)}


def pair_counts(rounds: Iterable[Round], roster: Sequence[str], role: Role = 'partners') -> np.ndarray:
    """Symmetric matrix counting how often players i and k (in roster order) played together or against each other.

    :param rounds:  The rounds played, e.g. a schedule.
    :param roster:  The players, fixing the order of rows and columns.
    :param role:    'partners' counts players on the same side, 'opponents' players on opposite sides.
    """
    idx = _index(roster)
    counts = np.zeros((len(roster), len(roster)), dtype=int)
    for rnd in rounds:
        for m in rnd.matches:
            match role:
                case 'partners':
                    pairs = m.partnerships()
                case 'opponents':
                    pairs = m.oppositions()
                case _:
                    raise ValueError(f"unknown role '{role}'")
            for a, b in pairs:
                counts[idx[a], idx[b]] += 1
                counts[idx[b], idx[a]] += 1
    return counts


def partnership_table(rounds: Iterable[Round], roster: Sequence[str], role: Role = 'partners') -> pd.DataFrame:
    """`pair_counts` as a data frame labelled by player ids."""
    return pd.DataFrame(pair_counts(rounds, roster, role), index=list(roster), columns=list(roster))


def games_per_player(rounds: Iterable[Round], roster: Sequence[str]) -> np.ndarray:
    idx = _index(roster)
    games = np.zeros(len(roster), dtype=int)
    for rnd in rounds:
        for p in rnd.playing:
            games[idx[p]] += 1
    return games


def rests_per_player(rounds: Iterable[Round], roster: Sequence[str]) -> np.ndarray:
    idx = _index(roster)
    rests = np.zeros(len(roster), dtype=int)
    for rnd in rounds:
        for p in rnd.resting_players:
            rests[idx[p]] += 1
    return rests


def _role_of(format: Format) -> Role:
    return 'partners' if check_format(format) == 'doubles' else 'opponents'


def coverage(rounds: Iterable[Round], roster: Sequence[str], format: Format) -> float:
    """Fraction of all pairs of players that partnered (doubles) or met (singles) at least once."""
    n_pairs = comb(len(roster), 2, exact=True)
    if n_pairs == 0:
        return 0.0
    counts = pair_counts(rounds, roster, _role_of(format))
    return float(np.count_nonzero(np.triu(counts, k=1)) / n_pairs)


def validate_schedule(rounds: Sequence[Round], roster: Sequence[str], format: Format) -> list[str]:
    """Look for everything that should never happen in a schedule.

    :return:    Descriptions of the problems found, an empty list for a valid schedule.
    """
    role = _role_of(format)
    problems: list[str] = []
    roster_set = set(roster)
    strangers = False

    for r, rnd in enumerate(rounds, start=1):
        playing = rnd.playing
        if len(set(playing)) != len(playing):
            problems.append(f"round {r}: a player is in more than one match")
        unknown = set(playing) - roster_set
        if unknown:
            strangers = True
            problems.append(f"round {r}: players not on the roster: {sorted(unknown)}")
        both = set(playing) & set(rnd.resting_players)
        if both:
            problems.append(f"round {r}: players both playing and resting: {sorted(both)}")
        if set(rnd.resting_players) != roster_set - set(playing):
            problems.append(f"round {r}: resting players do not match the players left out")

    # pair counts are only defined over the roster
    if strangers:
        return problems

    counts = pair_counts(rounds, roster, role)
    for i, k in zip(*np.nonzero(np.triu(counts, k=1) > 1)):
        problems.append(f"{roster[i]} and {roster[k]} are {role} {counts[i, k]} times")
    return problems
