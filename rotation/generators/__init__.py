"""Schedule generators working on abstract positions `0..n-1`.

A generator returns a list of rounds, each round a list of matches, each match a pair of teams of positions. Mapping
positions onto actual players is left to the caller.
"""
from .base import PositionMatch, PositionRound, UnsupportedRoster
from .doubles import doubles_rounds
from .singles import singles_rounds

__all__ = ['PositionMatch', 'PositionRound', 'UnsupportedRoster', 'doubles_rounds', 'singles_rounds']
