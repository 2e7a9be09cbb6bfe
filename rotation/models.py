from typing import Iterator, Literal, Sequence
from attrs import define, field, validators
import pandas as pd

Format = Literal['singles', 'doubles']
FORMATS: tuple[Format, ...] = ('singles', 'doubles')
TEAM_SIZE: dict[Format, int] = {'singles': 1, 'doubles': 2}


def check_format(format: str) -> Format:
    if format not in FORMATS:
        raise ValueError(f"unknown format '{format}', expected one of {FORMATS}")
    return format


@define(frozen=True)
class Match:
    """Two opposing sides playing on one court. For singles each side holds a single player id, for doubles two."""
    team1: tuple[str, ...] = field(converter=tuple)
    team2: tuple[str, ...] = field(converter=tuple)

    @property
    def players(self) -> tuple[str, ...]:
        return self.team1 + self.team2

    def partnerships(self) -> list[tuple[str, str]]:
        """The (sorted) pairs of players playing on the same side. Empty for singles."""
        return [tuple(sorted(team)) for team in (self.team1, self.team2) if len(team) == 2]

    def oppositions(self) -> list[tuple[str, str]]:
        """The (sorted) pairs of players facing each other across the net."""
        return [tuple(sorted((a, b))) for a in self.team1 for b in self.team2]


@define(frozen=True)
class Round:
    """Matches played simultaneously (one per court) and the players sitting this round out."""
    matches: tuple[Match, ...] = field(converter=tuple, factory=tuple)
    resting_players: tuple[str, ...] = field(converter=tuple, factory=tuple)

    @classmethod
    def from_matches(cls, matches: Sequence[Match], roster: Sequence[str]) -> 'Round':
        """Build a round, deriving the resting players (in roster order) from who is not playing."""
        playing = {p for m in matches for p in m.players}
        return cls(matches, [p for p in roster if p not in playing])

    @classmethod
    def empty(cls, roster: Sequence[str]) -> 'Round':
        return cls((), roster)

    @property
    def playing(self) -> tuple[str, ...]:
        return tuple(p for m in self.matches for p in m.players)

    def truncated(self, max_courts: int, roster: Sequence[str]) -> 'Round':
        """Keep only the first `max_courts` matches. Whoever drops out joins the resting players."""
        if len(self.matches) <= max_courts:
            return self
        return Round.from_matches(self.matches[:max_courts], roster)

    def __bool__(self) -> bool:
        return len(self.matches) > 0


@define(frozen=True)
class Scheduled:
    """A supported roster / format combination with its (non-empty) sequence of rounds."""
    format: Format
    rounds: tuple[Round, ...] = field(converter=tuple, validator=validators.min_len(1))

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[Round]:
        return iter(self.rounds)

    def __getitem__(self, index: int) -> Round:
        return self.rounds[index]

    def to_frame(self) -> pd.DataFrame:
        """One row per match, courts and rounds numbered from 1."""
        rows = [
            {'round': r, 'court': c, 'team1': ' & '.join(m.team1), 'team2': ' & '.join(m.team2)}
            for r, rnd in enumerate(self.rounds, start=1)
            for c, m in enumerate(rnd.matches, start=1)
        ]
        return pd.DataFrame(rows, columns=['round', 'court', 'team1', 'team2'])


@define(frozen=True)
class Unsupported:
    """No optimal schedule exists for this roster / format combination.

    It behaves like an empty schedule, so `if not schedule:` reads as "cannot schedule".
    """
    format: Format
    reason: str

    @property
    def rounds(self) -> tuple[Round, ...]:
        return ()

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Round]:
        return iter(())

    def __getitem__(self, index: int) -> Round:
        return self.rounds[index]


ScheduleResult = Scheduled | Unsupported
