"""Tests for api_logging decorators and file logging."""

from __future__ import annotations

import pytest

from actiming.api_logging import log_api_call, log_service_call


class _FakeRepo:
    """Minimal class to test logging decorators."""

    @log_api_call
    def get_items(self, year: int) -> list[dict]:
        return [{"name": "item1"}, {"name": "item2"}]

    @log_api_call
    def get_failing(self, key: int) -> list[dict]:
        raise ValueError("test error")

    @log_api_call
    async def get_items_async(self, url: str) -> list[dict]:
        return [{"name": "item1"}]

    @log_api_call
    async def get_failing_async(self, url: str) -> list[dict]:
        raise ConnectionError("down")

    @log_service_call
    def compute_stuff(self, data: list) -> dict:
        return {"result": len(data)}

    @log_service_call
    def compute_failing(self) -> None:
        raise RuntimeError("service error")

    @log_service_call
    async def refresh(self) -> bool:
        return True


@pytest.fixture
def fake_repo():
    return _FakeRepo()


def _log_text(log_dir) -> str:
    return (log_dir / "api_calls.log").read_text(encoding="utf-8")


class TestLogApiCall:
    def test_success(self, fake_repo, _isolated_api_log) -> None:
        assert len(fake_repo.get_items(2024)) == 2
        text = _log_text(_isolated_api_log)
        assert "CALL: _FakeRepo.get_items(2024)" in text
        assert "OK: _FakeRepo.get_items(2024) -> 2 items" in text

    def test_kwargs(self, fake_repo, _isolated_api_log) -> None:
        fake_repo.get_items(year=2024)
        assert "get_items(year=2024)" in _log_text(_isolated_api_log)

    def test_failure_reraises(self, fake_repo, _isolated_api_log) -> None:
        with pytest.raises(ValueError, match="test error"):
            fake_repo.get_failing(7)
        assert "FAIL: _FakeRepo.get_failing(7) -> ValueError: test error" in _log_text(_isolated_api_log)

    @pytest.mark.asyncio
    async def test_async_success(self, fake_repo, _isolated_api_log) -> None:
        assert await fake_repo.get_items_async("u") == [{"name": "item1"}]
        assert "OK: _FakeRepo.get_items_async('u') -> 1 items" in _log_text(_isolated_api_log)

    @pytest.mark.asyncio
    async def test_async_failure(self, fake_repo, _isolated_api_log) -> None:
        with pytest.raises(ConnectionError):
            await fake_repo.get_failing_async("u")
        assert "ConnectionError: down" in _log_text(_isolated_api_log)

    def test_preserves_name(self) -> None:
        assert _FakeRepo.get_items.__name__ == "get_items"
        assert _FakeRepo.get_items_async.__name__ == "get_items_async"


class TestLogServiceCall:
    def test_success(self, fake_repo, _isolated_api_log) -> None:
        assert fake_repo.compute_stuff([1, 2, 3]) == {"result": 3}
        text = _log_text(_isolated_api_log)
        assert "SERVICE CALL: _FakeRepo.compute_stuff([1, 2, 3])" in text
        assert "SERVICE OK: _FakeRepo.compute_stuff" in text

    def test_failure(self, fake_repo, _isolated_api_log) -> None:
        with pytest.raises(RuntimeError):
            fake_repo.compute_failing()
        assert "SERVICE FAIL: _FakeRepo.compute_failing -> RuntimeError" in _log_text(_isolated_api_log)

    @pytest.mark.asyncio
    async def test_async(self, fake_repo, _isolated_api_log) -> None:
        assert await fake_repo.refresh() is True
        assert "SERVICE OK: _FakeRepo.refresh" in _log_text(_isolated_api_log)

    def test_log_line_format(self, fake_repo, _isolated_api_log) -> None:
        fake_repo.compute_stuff([])
        first = _log_text(_isolated_api_log).splitlines()[0]
        assert " | INFO | SERVICE CALL:" in first
