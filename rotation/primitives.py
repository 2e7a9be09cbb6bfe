from typing import Sequence, TypeVar
import numpy as np

T = TypeVar('T')

RandomSource = np.random.Generator | int | None


def make_rng(random: RandomSource = None) -> np.random.Generator:
    """Turn a seed (or nothing) into a numpy generator. A generator is passed through unchanged."""
    if isinstance(random, np.random.Generator):
        return random
    return np.random.default_rng(random)


def combinations(items: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """All ways of taking `k` items out of `items`, in lexicographic order of their indices."""
    if k == 0:
        return [()]
    if k > len(items):
        return []

    result: list[tuple[T, ...]] = []

    def backtrack(start: int, current: list[T]):
        if len(current) == k:
            result.append(tuple(current))
            return
        for i in range(start, len(items) - (k - len(current)) + 1):
            current.append(items[i])
            backtrack(i + 1, current)
            current.pop()

    backtrack(0, [])
    return result


def shuffled(items: Sequence[T], rng: np.random.Generator) -> list[T]:
    """Fisher-Yates shuffle of a copy of `items`."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        out[i], out[j] = out[j], out[i]
    return out
