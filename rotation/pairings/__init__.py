from .history import HistoryPairer, PairingHistory

__all__ = ['HistoryPairer', 'PairingHistory']
