import pytest
import numpy as np

from rotation import HistoryPairer, Match, PairingHistory, pair_counts, validate_schedule

roster = [f"p{i}" for i in range(6)]


def history_games(history: PairingHistory) -> np.ndarray:
    return np.array([history.games[p] for p in roster])


def test_history_counts():
    history = PairingHistory([Match(('p0', 'p1'), ('p2', 'p3')), Match(('p1', 'p0'), ('p4', 'p5'))])
    assert history.partners[('p0', 'p1')] == 2
    assert history.opponents[('p0', 'p2')] == 1
    assert history.games['p0'] == 2
    assert history.games['p5'] == 1
    assert history.doubles_score(('p0', 'p1'), ('p2', 'p3')) < history.doubles_score(('p0', 'p2'), ('p1', 'p3'))
    assert history.singles_score('p4', 'p5') > history.singles_score('p0', 'p1')


def test_doubles_six_players():
    pairer = HistoryPairer(random=3)
    history = PairingHistory()
    rounds = [pairer(roster, 'doubles', 2, history) for _ in range(6)]
    for rnd in rounds:
        assert len(rnd.matches) == 1
        assert len(rnd.resting_players) == 2
        assert validate_schedule([rnd], roster, 'doubles') == []

    # the pairer keeps the history up to date itself
    assert sum(history.games.values()) == 4 * 6
    assert sum(history.partners.values()) == 2 * 6
    assert np.all(pair_counts(rounds, roster, 'partners').sum(axis=1) == history_games(history))


def test_singles_odd_players():
    pairer = HistoryPairer(random=0)
    players = roster[:5]
    history = []
    for _ in range(5):
        rnd = pairer(players, 'singles', 4, history)
        assert len(rnd.matches) == 2
        assert len(rnd.resting_players) == 1
        history.extend(rnd.matches)
    games = np.array([sum(p in m.players for m in history) for p in players])
    assert games.sum() == 2 * 2 * 5


@pytest.mark.parametrize("format, n", [('singles', 1), ('doubles', 3)])
def test_too_few_players(format: str, n: int):
    rnd = HistoryPairer()(roster[:n], format, 2)
    assert rnd.matches == ()
    assert rnd.resting_players == tuple(roster[:n])


def test_courts_limit():
    rnd = HistoryPairer(random=1)(roster, 'singles', 1)
    assert len(rnd.matches) == 1
    assert len(rnd.resting_players) == 4
