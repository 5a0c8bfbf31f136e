"""Redis History Repository - HistoryRepositoryPort 구현체.

스캔 기록을 Redis List에 JSON으로 저장 (최신순, 최대 N개).

Key 패턴:
- 히스토리: {key_prefix}:history
"""

from __future__ import annotations

import json
import logging
import os

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ecosort.application.history.ports.history_repository import HistoryRepositoryPort
from ecosort.domain.exceptions import HistoryUnavailableError
from ecosort.domain.value_objects import ScanRecord

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20


class RedisHistoryRepository(HistoryRepositoryPort):
    """Redis List 기반 히스토리 저장소."""

    def __init__(
        self,
        redis_url: str | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
        key_prefix: str = "ecosort",
        client: aioredis.Redis | None = None,
    ):
        """초기화.

        Args:
            redis_url: Redis URL (None이면 환경변수 사용)
            limit: 최대 보관 개수
            key_prefix: Redis 키 prefix
            client: 주입할 Redis 클라이언트 (테스트용, None이면 lazy 생성)
        """
        self._redis_url = redis_url or os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self._limit = limit
        self._key = f"{key_prefix}:history"
        self._client = client
        logger.info(
            "RedisHistoryRepository initialized (url=%s, limit=%d)",
            self._redis_url,
            self._limit,
        )

    def _get_client(self) -> aioredis.Redis:
        """Lazy Redis 클라이언트 생성."""
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_timeout=5.0,
                socket_connect_timeout=5.0,
            )
        return self._client

    async def add(self, record: ScanRecord) -> None:
        """기록 추가 후 최대 개수로 트림.

        저장 실패는 경고만 남기고 분류 결과 반환을 막지 않습니다.
        """
        try:
            client = self._get_client()
            await client.lpush(self._key, json.dumps(record.to_dict()))
            await client.ltrim(self._key, 0, self._limit - 1)
            logger.debug("scan_history_added", extra={"scan_id": record.id})
        except Exception as e:
            logger.warning(
                "scan_history_add_failed",
                extra={"scan_id": record.id, "error": str(e)},
            )

    async def list_all(self) -> list[ScanRecord]:
        raw_records = await self._read_all()

        records = []
        for raw in raw_records:
            try:
                records.append(ScanRecord.from_dict(json.loads(raw)))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("scan_history_record_corrupted", extra={"error": str(e)})
        return records

    async def delete(self, scan_id: str) -> bool:
        for raw in await self._read_all():
            try:
                record_id = str(json.loads(raw).get("id"))
            except (ValueError, AttributeError):
                continue
            if record_id == scan_id:
                try:
                    removed = await self._get_client().lrem(self._key, 1, raw)
                except RedisError as e:
                    raise HistoryUnavailableError() from e
                return removed > 0
        return False

    async def clear(self) -> None:
        try:
            await self._get_client().delete(self._key)
        except RedisError as e:
            raise HistoryUnavailableError() from e

    async def _read_all(self) -> list[str]:
        """조회 실패는 HistoryUnavailableError로 변환 (add와 달리 호출자에게 보고)."""
        try:
            return await self._get_client().lrange(self._key, 0, -1)
        except RedisError as e:
            raise HistoryUnavailableError() from e
