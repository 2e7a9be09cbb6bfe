import logging
from collections import Counter
from typing import Iterable, Sequence
import numpy as np

from ..primitives import RandomSource, combinations, make_rng, shuffled
from ..models import Format, Match, Round, TEAM_SIZE, check_format

logger = logging.getLogger(__name__)

Pair = tuple[str, str]


def _pair(a: str, b: str) -> Pair:
    return (a, b) if a <= b else (b, a)


class PairingHistory:
    """How often each pair partnered or opposed, and how many games each player had."""

    def __init__(self, matches: Iterable[Match] = ()):
        self.partners: Counter[Pair] = Counter()
        self.opponents: Counter[Pair] = Counter()
        self.games: Counter[str] = Counter()
        for m in matches:
            self.record(m)

    def record(self, match: Match):
        for pair in match.partnerships():
            self.partners[pair] += 1
        for pair in match.oppositions():
            self.opponents[pair] += 1
        for p in match.players:
            self.games[p] += 1

    def singles_score(self, p1: str, p2: str) -> int:
        game_balance = 100 - 5 * self.games[p1] - 5 * self.games[p2]
        diversity = 50 - 20 * self.opponents[_pair(p1, p2)]
        return game_balance + diversity

    def doubles_score(self, team1: Sequence[str], team2: Sequence[str]) -> int:
        score = sum(100 - 15 * self.partners[_pair(*team)] for team in (team1, team2))
        score += sum(50 - 10 * self.opponents[_pair(a, b)] for a in team1 for b in team2)
        score += sum(30 - 3 * self.games[p] for p in (*team1, *team2))
        return score


class HistoryPairer:
    """A greedy pairer for rosters without an optimal rotation (e.g. doubles with 6 players).

    Court by court, it picks the match favouring players with few games, fresh partnerships and fresh match-ups, judged
    by the history of matches played so far. Unlike the rotations, this gives no guarantee about when a pairing repeats.
    """

    def __init__(self, random: RandomSource = None):
        """
        :param random:  A numpy random generator or seed. The roster is shuffled before every round so that ties are
                        broken differently each time.
        """
        self.rng = make_rng(random)

    def __call__(
            self,
            roster: Sequence[str],
            format: Format,
            courts: int,
            history: Iterable[Match] | PairingHistory = (),
    ) -> Round:
        team_size = TEAM_SIZE[check_format(format)]
        if not isinstance(history, PairingHistory):
            history = PairingHistory(history)

        available = shuffled(roster, self.rng)
        matches: list[Match] = []
        while len(matches) < courts and len(available) >= 2 * team_size:
            match = self._best_singles(available, history) if team_size == 1 else self._best_doubles(available, history)
            matches.append(match)
            history.record(match)
            available = [p for p in available if p not in match.players]

        logger.info("paired %d %s match(es) from history, %d player(s) resting",
                    len(matches), format, len(roster) - team_size * 2 * len(matches))
        return Round.from_matches(matches, roster)

    @staticmethod
    def _best_singles(available: list[str], history: PairingHistory) -> Match:
        candidates = combinations(available, 2)
        scores = np.array([history.singles_score(a, b) for a, b in candidates])
        a, b = candidates[int(np.argmax(scores))]
        return Match((a,), (b,))

    @staticmethod
    def _best_doubles(available: list[str], history: PairingHistory) -> Match:
        best: Match | None = None
        best_score = -np.inf
        for a, b, c, d in combinations(available, 4):
            for team1, team2 in (((a, b), (c, d)), ((a, c), (b, d)), ((a, d), (b, c))):
                score = history.doubles_score(team1, team2)
                if score > best_score:
                    best, best_score = Match(team1, team2), score
        return best
