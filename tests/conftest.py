"""Shared test fixtures.

Every test gets its own HOME, config directory and workspace directories
under ``tmp_path``; nothing touches the real user config, and the launcher
never spawns a real process.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest
from loguru import logger

from claudy.cli import App
from claudy.managers.workspaces import WorkspaceRegistry
from claudy.settings import ClaudySettings, get_settings
from claudy.shell.prompts import Option
from claudy.store.local import LocalConfigStore

# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter that replays canned answers in order.

    ``select`` answers are ints (or ``None`` for cancel); ``prompt`` answers
    are strings (or ``None``).  Every call is recorded so tests can assert on
    the menus that were shown.
    """

    def __init__(self, *answers: int | str | None) -> None:
        self.answers = deque(answers)
        self.menus: list[tuple[str, list[Option]]] = []
        self.messages: list[str] = []

    def select(self, options: Sequence[Option], header: str = "") -> int | None:
        self.menus.append((header, list(options)))
        answer = self._next(f"select {header!r}")
        assert answer is None or isinstance(answer, int), f"expected an index for {header!r}, got {answer!r}"
        return answer

    def prompt(self, message: str) -> str | None:
        self.messages.append(message)
        answer = self._next(f"prompt {message!r}")
        assert answer is None or isinstance(answer, str), f"expected text for {message!r}, got {answer!r}"
        return answer

    def _next(self, what: str) -> int | str | None:
        assert self.answers, f"unexpected {what}: no scripted answers left"
        return self.answers.popleft()

    @property
    def exhausted(self) -> bool:
        return not self.answers


class FakeSpawn:
    """Records spawn calls instead of running anything."""

    def __init__(self, returncode: int | None = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[list[str], str | None]] = []

    def __call__(self, argv: Sequence[str], cwd: str | None) -> int | None:
        self.calls.append((list(argv), cwd))
        return self.returncode


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _quiet_loguru() -> Iterator[None]:
    """Drop loguru sinks so diagnostics never mix into captured output."""
    logger.remove()
    yield
    logger.remove()


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fake home directory for ``~`` expansion."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    return path


@pytest.fixture
def make_dir(tmp_path: Path) -> Callable[[str], str]:
    """Create a directory under ``tmp_path/dirs`` and return its path string."""

    def _make(name: str) -> str:
        path = tmp_path / "dirs" / name
        path.mkdir(parents=True, exist_ok=True)
        return str(path)

    return _make


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "workspaces.json"


# ---------------------------------------------------------------------------
# Store / registry / app
# ---------------------------------------------------------------------------


@pytest.fixture
def store(config_file: Path) -> LocalConfigStore:
    return LocalConfigStore(config_file)


@pytest.fixture
def registry(store: LocalConfigStore) -> WorkspaceRegistry:
    return WorkspaceRegistry(store)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[ClaudySettings]:
    """Settings pointing at an isolated config dir."""
    monkeypatch.setenv("CLAUDY_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("CLAUDY_CLAUDE_BIN", "claude")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def spawn() -> FakeSpawn:
    return FakeSpawn()


@pytest.fixture
def make_app(settings: ClaudySettings, spawn: FakeSpawn) -> Callable[..., App]:
    """Build an ``App`` with a scripted prompter and the fake spawner."""

    def _make(*answers: int | str | None) -> App:
        return App(settings=settings, prompter=ScriptedPrompter(*answers), spawn=spawn)

    return _make


@pytest.fixture
def scripted() -> Callable[..., ScriptedPrompter]:
    """Factory for a ``ScriptedPrompter`` with the given answers."""
    return ScriptedPrompter
