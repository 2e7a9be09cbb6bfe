import logging
from typing import Sequence, Sized

from .cache import ScheduleCache, cache_key
from .config import SchedulerConfig
from .generators import PositionRound, UnsupportedRoster, doubles_rounds, singles_rounds
from .primitives import RandomSource, make_rng, shuffled
from .models import Format, Match, Round, Scheduled, ScheduleResult, Unsupported, check_format

logger = logging.getLogger(__name__)

# advisory number of distinct doubles rounds for the roster sizes we know about
_KNOWN_DOUBLES_ROUNDS = {4: 3, 8: 7, 12: 11, 16: 15}


def calculate_max_unique_rounds(player_count: int, format: Format) -> int:
    """How many rounds can be played before the rotation starts repeating itself.

    For singles this is exact (counting the bye round for odd player counts). For doubles with more than 8 players it
    is only an estimate, the rotation used there makes no such promise.
    """
    check_format(format)
    if format == 'singles':
        if player_count < 2:
            return 0
        return player_count - 1 if player_count % 2 == 0 else player_count

    if player_count < 4 or player_count % 4 != 0:
        return 0
    return _KNOWN_DOUBLES_ROUNDS.get(player_count, max(1, player_count - 1))


class PairingScheduler:

    def __init__(
            self,
            config: SchedulerConfig | None = None,
            cache: ScheduleCache | None = None,
            random: RandomSource = None,
    ):
        """Generates rounds such that all partnerships (doubles) or match-ups (singles) are used before any repeats.

        Players are assigned to the positions of a fixed design by a random shuffle, once per combination of format,
        roster and number of courts. The resulting schedule is cached, so asking for a round again, or for the next one,
        stays consistent until the cache is cleared.

        :param config:  Tuning parameters, defaults to `SchedulerConfig()`.
        :param cache:   Where to keep computed schedules. Pass a shared instance to let several schedulers agree on
                        schedules; by default every scheduler owns its own.
        :param random:  A numpy random generator or a seed. Overrides `config.seed` if given.
        """
        self.config = config if config is not None else SchedulerConfig()
        self.cache = cache if cache is not None else ScheduleCache()
        self.rng = make_rng(random if random is not None else self.config.seed)

    def generate_complete_optimal_schedule(
            self,
            roster: Sequence[str],
            format: Format,
            max_courts: int | None = None,
    ) -> ScheduleResult:
        """The full schedule for this roster, every round cut down to at most `max_courts` matches.

        :return:    `Scheduled` with the rounds in playing order, or `Unsupported` (which is empty) if there is no
                    rotation for this number of players, i.e. doubles with a number of players which is not a positive
                    multiple of 4, or singles with less than 2 players.
        """
        roster = _check_roster(roster)
        format = check_format(format)
        max_courts = self._check_courts(max_courts)

        key = cache_key(roster, format, max_courts)
        schedule = self.cache.get(key)
        if schedule is not None:
            logger.debug("schedule cache hit for %s with %d players on %d court(s)", format, len(roster), max_courts)
            return schedule

        schedule = self._build(roster, format, max_courts)
        self.cache.put(key, schedule)
        return schedule

    def get_optimal_round(
            self,
            roster: Sequence[str],
            format: Format,
            round_number: int,
            max_courts: int | None = None,
    ) -> Round:
        """The `round_number`-th round (counting from 1) of the schedule for this roster.

        Once the schedule is exhausted it starts over from its first round, with the same players on the same positions.
        If there is no schedule for this roster, the round has no matches and everybody rests.
        The resting players are listed in the order of `roster`, even when the schedule was cached for a differently
        ordered roster.
        """
        if round_number < 1:
            raise ValueError(f"round numbers start at 1, got {round_number}")
        schedule = self.generate_complete_optimal_schedule(roster, format, max_courts)
        if not schedule:
            return Round.empty(roster)
        if round_number > len(schedule):
            logger.debug("round %d is past the %d unique rounds, repeating", round_number, len(schedule))
        rnd = schedule[(round_number - 1) % len(schedule)]
        resting = set(rnd.resting_players)
        return Round(rnd.matches, [p for p in roster if p in resting])

    def get_next_optimal_round(
            self,
            roster: Sequence[str],
            format: Format,
            existing_matches: Sized,
            max_courts: int | None = None,
    ) -> Round:
        """Guess the round number from the matches recorded so far and return that round.

        This assumes exactly one match was recorded per earlier round, which fails as soon as there are several courts
        or a round was recorded twice. Prefer `get_optimal_round` with an explicit round number.
        """
        round_number = len(existing_matches) + 1
        logger.debug("inferred round %d from %d existing match(es)", round_number, len(existing_matches))
        return self.get_optimal_round(roster, format, round_number, max_courts)

    def clear_cache(self):
        """Forget all schedules, the next request for any roster is shuffled anew.

        Do this when a new tournament or box league cycle starts, never in the middle of one.
        """
        self.cache.clear()

    clear_tournament_schedule_cache = clear_cache

    def _check_courts(self, max_courts: int | None) -> int:
        if max_courts is None:
            return self.config.default_courts
        if max_courts < 1:
            raise ValueError(f"at least one court is needed, got {max_courts}")
        return int(max_courts)

    def _build(self, roster: list[str], format: Format, max_courts: int) -> ScheduleResult:
        n = len(roster)
        players = shuffled(roster, self.rng)
        try:
            if format == 'doubles':
                position_rounds = doubles_rounds(n, self.rng, round_cap=self.config.large_group_round_cap)
            else:
                position_rounds = singles_rounds(n)
        except UnsupportedRoster as e:
            logger.info("no %s rotation for %d players: %s", format, n, e)
            return Unsupported(format, str(e))

        rounds = [_to_round(r, players, roster, max_courts) for r in position_rounds]
        logger.debug("generated %d %s round(s) for %d players on %d court(s)", len(rounds), format, n, max_courts)
        return Scheduled(format, rounds)


def _to_round(position_round: PositionRound, players: list[str], roster: list[str], max_courts: int) -> Round:
    matches = [
        Match([players[p] for p in team1], [players[p] for p in team2])
        for team1, team2 in position_round
    ]
    return Round.from_matches(matches, roster).truncated(max_courts, roster)


def _check_roster(roster: Sequence[str]) -> list[str]:
    roster = list(roster)
    if not all(isinstance(p, str) for p in roster):
        raise ValueError("player ids must be strings")
    if len(set(roster)) != len(roster):
        raise ValueError("roster contains duplicate player ids")
    return roster
