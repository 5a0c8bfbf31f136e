"""History Ports."""

from ecosort.application.history.ports.history_repository import HistoryRepositoryPort

__all__ = ["HistoryRepositoryPort"]
