from .base import PositionMatch, PositionRound, UnsupportedRoster


def circle_rounds(n: int) -> list[PositionRound]:
    """Round robin for an even number of positions by the circle method.

    Position 0 stays put while the others rotate one step per round, so after `n - 1` rounds every pair has met
    exactly once.
    """
    rotating = list(range(1, n))
    m = len(rotating)
    rounds: list[PositionRound] = []
    for _ in range(n - 1):
        matches: list[PositionMatch] = [((0,), (rotating[0],))]
        for i in range(1, m, 2):
            if i + 1 < m:
                matches.append(((rotating[i],), (rotating[m - i],)))
        rounds.append(matches)
        rotating.insert(0, rotating.pop())
    return rounds


def singles_rounds(n: int) -> list[PositionRound]:
    """Singles round robin for `n >= 2` positions.

    For odd `n` an extra bye position `n` is added. Matches against it are dropped, so its opponent rests that round.
    """
    if n < 2:
        raise UnsupportedRoster(f"singles requires at least 2 players, got {n}")
    if n % 2 == 0:
        return circle_rounds(n)

    bye = n
    return [
        [m for m in matches if bye not in m[0] + m[1]]
        for matches in circle_rounds(n + 1)
    ]
