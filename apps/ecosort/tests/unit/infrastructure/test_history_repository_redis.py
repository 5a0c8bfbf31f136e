"""RedisHistoryRepository Unit Tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from ecosort.domain.enums import WasteCategory
from ecosort.domain.exceptions import HistoryUnavailableError
from ecosort.domain.value_objects import ScanRecord, WasteItem
from ecosort.infrastructure.persistence_redis import RedisHistoryRepository


def _record(scan_id: str) -> ScanRecord:
    return ScanRecord(
        id=scan_id,
        timestamp=1_700_000_000_000,
        items=(WasteItem(item_name="Can", category=WasteCategory.RECYCLABLE),),
    )


@pytest.fixture
def redis_client() -> AsyncMock:
    client = AsyncMock()
    client.lrange.return_value = []
    client.lrem.return_value = 1
    return client


@pytest.fixture
def repository(redis_client) -> RedisHistoryRepository:
    return RedisHistoryRepository(limit=20, key_prefix="test", client=redis_client)


class TestAdd:
    """add() 테스트."""

    @pytest.mark.asyncio
    async def test_add_pushes_and_trims(self, repository, redis_client):
        await repository.add(_record("scan-1"))

        key, raw = redis_client.lpush.call_args.args
        assert key == "test:history"
        assert json.loads(raw)["id"] == "scan-1"
        redis_client.ltrim.assert_awaited_once_with("test:history", 0, 19)

    @pytest.mark.asyncio
    async def test_add_failure_is_logged_not_raised(self, repository, redis_client):
        redis_client.lpush.side_effect = ConnectionError("redis down")

        await repository.add(_record("scan-1"))

        redis_client.ltrim.assert_not_awaited()


class TestListAll:
    """list_all() 테스트."""

    @pytest.mark.asyncio
    async def test_list_restores_records(self, repository, redis_client):
        redis_client.lrange.return_value = [
            json.dumps(_record("scan-2").to_dict()),
            json.dumps(_record("scan-1").to_dict()),
        ]

        records = await repository.list_all()

        assert [r.id for r in records] == ["scan-2", "scan-1"]
        assert records[0].items[0].category is WasteCategory.RECYCLABLE

    @pytest.mark.asyncio
    async def test_corrupted_entries_skipped(self, repository, redis_client):
        redis_client.lrange.return_value = [
            "not-json",
            json.dumps({"timestamp": 1}),
            json.dumps(_record("scan-1").to_dict()),
        ]

        records = await repository.list_all()

        assert [r.id for r in records] == ["scan-1"]


class TestDelete:
    """delete() / clear() 테스트."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, repository, redis_client):
        raw = json.dumps(_record("scan-1").to_dict())
        redis_client.lrange.return_value = [raw]

        assert await repository.delete("scan-1") is True
        redis_client.lrem.assert_awaited_once_with("test:history", 1, raw)

    @pytest.mark.asyncio
    async def test_delete_missing(self, repository, redis_client):
        redis_client.lrange.return_value = [json.dumps(_record("scan-1").to_dict())]

        assert await repository.delete("scan-9") is False
        redis_client.lrem.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_clear(self, repository, redis_client):
        await repository.clear()

        redis_client.delete.assert_awaited_once_with("test:history")


class TestUnavailable:
    """조회/삭제 시 Redis 장애 테스트."""

    @pytest.mark.asyncio
    async def test_list_all_raises_unavailable(self, repository, redis_client):
        redis_client.lrange.side_effect = RedisConnectionError("redis down")

        with pytest.raises(HistoryUnavailableError) as exc_info:
            await repository.list_all()

        assert isinstance(exc_info.value.__cause__, RedisConnectionError)

    @pytest.mark.asyncio
    async def test_delete_raises_unavailable(self, repository, redis_client):
        redis_client.lrange.return_value = [json.dumps(_record("scan-1").to_dict())]
        redis_client.lrem.side_effect = RedisConnectionError("redis down")

        with pytest.raises(HistoryUnavailableError):
            await repository.delete("scan-1")

    @pytest.mark.asyncio
    async def test_clear_raises_unavailable(self, repository, redis_client):
        redis_client.delete.side_effect = RedisConnectionError("redis down")

        with pytest.raises(HistoryUnavailableError):
            await repository.clear()
