"""History Services."""

from ecosort.application.history.services.history_service import HistoryService

__all__ = ["HistoryService"]
