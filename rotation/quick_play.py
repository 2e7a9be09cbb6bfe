"""Planning all rounds of a quick play session up front."""
import logging
from typing import Sequence
from attrs import define, field
from tqdm import tqdm

from .pairings import HistoryPairer, PairingHistory
from .scheduler import PairingScheduler, calculate_max_unique_rounds
from .models import Format, Round, check_format

logger = logging.getLogger(__name__)

# minutes per round
SINGLES_ROUND_MINUTES = 8
DOUBLES_ROUND_MINUTES = 10


def round_duration(player_count: int, format: Format, courts: int) -> int:
    """Estimated minutes for one round, 0 if not a single match can be played."""
    if check_format(format) == 'singles':
        matches = min(player_count // 2, courts)
        return SINGLES_ROUND_MINUTES if matches > 0 else 0
    matches = min(player_count // 4, courts)
    return DOUBLES_ROUND_MINUTES if matches > 0 else 0


@define
class QuickPlayPlan:
    format: Format
    roster: tuple[str, ...] = field(converter=tuple)
    courts: int
    rounds: list[Round] = field(factory=list)

    @property
    def estimated_duration(self) -> int:
        """Estimated minutes for all rounds."""
        return round_duration(len(self.roster), self.format, self.courts) * len(self.rounds)

    @property
    def max_unique_rounds(self) -> int:
        return calculate_max_unique_rounds(len(self.roster), self.format)

    @property
    def repeats(self) -> bool:
        """Whether more rounds are planned than there are distinct ones, so pairings will come up again."""
        return len(self.rounds) > self.max_unique_rounds


def plan_quick_play(
        roster: Sequence[str],
        format: Format,
        max_rounds: int,
        courts: int,
        scheduler: PairingScheduler | None = None,
        pairer: HistoryPairer | None = None,
        pbar: bool = False,
) -> QuickPlayPlan:
    """Generate all rounds of a quick play session.

    A quick play session is a new event, so cached schedules are discarded first and the players get a fresh shuffle.
    Rounds come from the optimal rotation; where there is none for this roster, the `HistoryPairer` fills in.

    :param roster:      The players taking part.
    :param format:      'singles' or 'doubles'.
    :param max_rounds:  How many rounds to play.
    :param courts:      Courts available, i.e. the maximum number of matches per round.
    :param scheduler:   The scheduler to draw rounds from, a new one if not given.
    :param pairer:      The fallback pairer, a new one if not given.
    :param pbar:        Show a progress bar.
    """
    check_format(format)
    if format == 'singles' and len(roster) < 2:
        raise ValueError("singles quick play requires at least 2 players")
    if format == 'doubles' and len(roster) < 4:
        raise ValueError("doubles quick play requires at least 4 players")
    if max_rounds < 1:
        raise ValueError(f"at least one round must be played, got {max_rounds}")

    scheduler = scheduler if scheduler is not None else PairingScheduler()
    pairer = pairer if pairer is not None else HistoryPairer(scheduler.rng)
    scheduler.clear_tournament_schedule_cache()

    plan = QuickPlayPlan(format, roster, courts)
    history = PairingHistory()
    for round_number in tqdm(range(1, max_rounds + 1), disable=not pbar):
        rnd = scheduler.get_optimal_round(roster, format, round_number, courts)
        if not rnd:
            logger.info("no optimal round %d for %d players, pairing from history", round_number, len(roster))
            rnd = pairer(roster, format, courts, history)
        else:
            for m in rnd.matches:
                history.record(m)
        plan.rounds.append(rnd)

    if plan.repeats:
        logger.info("%d rounds planned but only %d are unique", len(plan.rounds), plan.max_unique_rounds)
    return plan
