PositionMatch = tuple[tuple[int, ...], tuple[int, ...]]
PositionRound = list[PositionMatch]


class UnsupportedRoster(ValueError):
    """The number of players has no optimal rotation in the requested format."""
