"""Redis Persistence Infrastructure - Scan History."""

from .history_repository_redis import RedisHistoryRepository

__all__ = ["RedisHistoryRepository"]
