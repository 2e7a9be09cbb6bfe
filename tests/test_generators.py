import pytest
import numpy as np

from rotation.generators import UnsupportedRoster, doubles_rounds, singles_rounds
from rotation.generators.doubles import four_player_rounds, eight_player_rounds, large_group_rounds
from rotation.primitives import combinations, shuffled


def partner_counts(rounds, n: int) -> np.ndarray:
    counts = np.zeros((n, n), dtype=int)
    for r in rounds:
        for team1, team2 in r:
            for a, b in (team1, team2):
                counts[a, b] += 1
                counts[b, a] += 1
    return counts


def opponent_counts(rounds, n: int) -> np.ndarray:
    counts = np.zeros((n, n), dtype=int)
    for r in rounds:
        for team1, team2 in r:
            for a in team1:
                for b in team2:
                    counts[a, b] += 1
                    counts[b, a] += 1
    return counts


def test_combinations():
    assert combinations([1, 2, 3], 0) == [()]
    assert combinations([1, 2], 3) == []
    assert combinations('abcd', 2) == [('a', 'b'), ('a', 'c'), ('a', 'd'), ('b', 'c'), ('b', 'd'), ('c', 'd')]
    assert len(combinations(range(8), 4)) == 70


def test_shuffled():
    rng = np.random.default_rng(1)
    items = list('abcdefgh')
    out = shuffled(items, rng)
    assert sorted(out) == items
    assert items == list('abcdefgh')  # not in place
    assert shuffled(items, np.random.default_rng(7)) == shuffled(items, np.random.default_rng(7))
    assert shuffled([], rng) == []


def test_four_players():
    rounds = four_player_rounds()
    assert rounds == [[((0, 1), (2, 3))], [((0, 2), (1, 3))], [((0, 3), (1, 2))]]
    counts = partner_counts(rounds, 4)
    assert np.all(counts + np.eye(4, dtype=int) == 1)


def test_eight_players():
    rounds = eight_player_rounds()
    assert len(rounds) == 7
    for r in rounds:
        assert len(r) == 2
        assert sorted(p for m in r for team in m for p in team) == list(range(8))

    off_diagonal = ~np.eye(8, dtype=bool)
    assert np.all(partner_counts(rounds, 8)[off_diagonal] == 1)
    assert np.all(opponent_counts(rounds, 8)[off_diagonal] == 2)


@pytest.mark.parametrize("n", [12, 16, 20, 24, 32])
def test_large_group(n: int):
    rng = np.random.default_rng(n)
    rounds = doubles_rounds(n, rng)
    assert len(rounds) == min(n - 1, 14)
    for r in rounds:
        assert len(r) == n // 4
        players = [p for m in r for team in m for p in team]
        assert sorted(players) == list(range(n))


def test_large_group_round_cap():
    assert len(large_group_rounds(32, offset=3, round_cap=5)) == 5
    assert len(large_group_rounds(12, offset=0, round_cap=100)) == 11
    # offset only shifts where the rotation starts
    assert large_group_rounds(12, offset=2)[0] == large_group_rounds(12, offset=1)[1]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 6, 7, 10, 14])
def test_doubles_unsupported(n: int):
    with pytest.raises(UnsupportedRoster):
        doubles_rounds(n, np.random.default_rng())
    with pytest.raises(ValueError):
        doubles_rounds(n, np.random.default_rng())


@pytest.mark.parametrize("n", [2, 4, 6, 8, 10, 16])
def test_singles_even(n: int):
    rounds = singles_rounds(n)
    assert len(rounds) == n - 1
    for r in rounds:
        assert len(r) == n // 2
        players = [p for m in r for team in m for p in team]
        assert sorted(players) == list(range(n))

    off_diagonal = ~np.eye(n, dtype=bool)
    assert np.all(opponent_counts(rounds, n)[off_diagonal] == 1)


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_singles_odd(n: int):
    rounds = singles_rounds(n)
    assert len(rounds) == n
    resting = []
    for r in rounds:
        players = {p for m in r for team in m for p in team}
        assert n not in players  # the bye never shows up
        assert len(players) == n - 1
        resting.extend(set(range(n)) - players)
    assert sorted(resting) == list(range(n))

    off_diagonal = ~np.eye(n, dtype=bool)
    assert np.all(opponent_counts(rounds, n)[off_diagonal] == 1)


@pytest.mark.parametrize("n", [0, 1])
def test_singles_unsupported(n: int):
    with pytest.raises(UnsupportedRoster):
        singles_rounds(n)
