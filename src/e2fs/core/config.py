"""Client configuration data structures and loading.

Provides immutable configuration loaded from ~/.e2fs/config.toml (or the file
named by $E2FS_CONFIG). Loaded once at the CLI entry point and stored in
E2fsContext.

Example config.toml:

    search_dirs = ["/opt/e2fsprogs/sbin"]
    timeout = 600
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "E2FS_CONFIG"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    extra_search_dirs are searched after PATH and before /sbin and /usr/sbin.
    A timeout of None means tools may run for as long as they need.
    """

    extra_search_dirs: tuple[str, ...] = ()
    timeout: float | None = None


class ConfigStore(ABC):
    """Abstract interface for config access.

    Enables in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config exists."""
        ...

    @abstractmethod
    def load(self) -> ClientConfig:
        """Load config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config values are malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads a TOML config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> ClientConfig:
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        search_dirs = data.get("search_dirs", [])
        if not isinstance(search_dirs, list) or not all(isinstance(d, str) for d in search_dirs):
            raise ValueError(f"'search_dirs' must be a list of strings in {config_path}")

        timeout = data.get("timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ValueError(f"'timeout' must be a positive number in {config_path}")
            timeout = float(timeout)

        return ClientConfig(extra_search_dirs=tuple(search_dirs), timeout=timeout)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".e2fs" / "config.toml"


class FakeConfigStore(ConfigStore):
    """In-memory config store for tests. A config of None means "not created"."""

    def __init__(self, config: ClientConfig | None) -> None:
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> ClientConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def path(self) -> Path:
        return Path("/test/.e2fs/config.toml")
