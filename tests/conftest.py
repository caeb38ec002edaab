"""Common test fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest

from world_timeline.cache import MemoryCache
from world_timeline.repository import FileSystemHistoryRepository
from world_timeline.services import HistoryService


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def write_content(content_dir: Path, relative_path: str, content: str) -> Path:
    """Write a dedented content file below content_dir."""
    path = content_dir / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(content).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def make_content(content_dir: Path):
    """Return a writer for files below content_dir, e.g. make_content("1945/1945.yaml", text)."""

    def _make(relative_path: str, content: str) -> Path:
        return write_content(content_dir, relative_path, content)

    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(default_ttl=600, clock=clock)


@pytest.fixture
def repository(content_dir: Path, cache: MemoryCache) -> FileSystemHistoryRepository:
    return FileSystemHistoryRepository(content_dir=content_dir, cache=cache)


@pytest.fixture
def history_service(repository: FileSystemHistoryRepository) -> HistoryService:
    return HistoryService(repository)


@pytest.fixture
def timeline_1945(content_dir: Path) -> Path:
    """
    Content tree:
    data/
    └── 1945
        ├── 1945.yaml
        └── 1945-08.yaml
    """
    write_content(
        content_dir,
        "1945/1945.yaml",
        """
        summary: "End of WWII"
        majorEvents:
          - date: "1945-08-15"
            title: 終戦
            category: 戦争・紛争
            description: ポツダム宣言の受諾を発表
            related_countries: [日本]
        """,
    )
    write_content(
        content_dir,
        "1945/1945-08.yaml",
        """
        events:
          - date: "1945-08-15"
            title: 玉音放送
            category: 戦争・紛争
            description: 昭和天皇による終戦の詔書の放送
            related_countries: [日本]
          - date: "1945-08-06"
            title: 広島への原子爆弾投下
            category: 戦争・紛争
            description: 広島市に原子爆弾が投下される
            related_countries: [日本, アメリカ]
            sources:
              - "広島市『広島原爆戦災誌』"
        """,
    )
    return content_dir
