from .cache import ScheduleCache
from .config import SchedulerConfig
from .pairings import HistoryPairer, PairingHistory
from .quick_play import QuickPlayPlan, plan_quick_play, round_duration
from .scheduler import PairingScheduler, calculate_max_unique_rounds
from .models import Format, Match, Round, Scheduled, ScheduleResult, Unsupported
from .validation import coverage, games_per_player, pair_counts, partnership_table, rests_per_player, validate_schedule

__all__ = [
    'ScheduleCache', 'SchedulerConfig', 'HistoryPairer', 'PairingHistory', 'QuickPlayPlan', 'plan_quick_play',
    'round_duration', 'PairingScheduler', 'calculate_max_unique_rounds', 'Format', 'Match', 'Round', 'Scheduled',
    'ScheduleResult', 'Unsupported', 'coverage', 'games_per_player', 'pair_counts', 'partnership_table',
    'rests_per_player', 'validate_schedule',
]
