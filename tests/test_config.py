from __future__ import annotations

from wither_room_finder.config import Settings


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("WITHER_ROOM_FINDER_MAX_CHUNK_RADIUS", "7")
    monkeypatch.setenv("WITHER_ROOM_FINDER_LOG_LEVEL", "debug")

    current = Settings()

    assert current.log_level == "debug"
    assert current.max_chunk_radius == 7
