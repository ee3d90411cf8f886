from spaceind.history.store import NameHistoryStore

__all__ = ["NameHistoryStore"]
