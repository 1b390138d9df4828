"""Application context with dependency injection."""

from dataclasses import dataclass

from e2fs.core.config import ClientConfig, ConfigStore, FilesystemConfigStore
from e2fs.core.e2fsprogs.abc import E2fsprogs
from e2fs.core.e2fsprogs.dry_run import DryRunE2fsprogs
from e2fs.core.e2fsprogs.real import RealE2fsprogs
from e2fs.core.executable import default_search_path


@dataclass(frozen=True)
class E2fsContext:
    """Immutable context holding all dependencies for e2fs commands.

    Created at CLI entry point and threaded through the commands.
    """

    e2fsprogs: E2fsprogs
    config: ClientConfig
    dry_run: bool
    timeout: float | None = None

    @staticmethod
    def for_test(
        e2fsprogs: E2fsprogs | None = None,
        config: ClientConfig | None = None,
        dry_run: bool = False,
        timeout: float | None = None,
    ) -> "E2fsContext":
        """Create test context with an in-memory e2fsprogs by default.

        Example:
            >>> fake = FakeE2fsprogs()
            >>> ctx = E2fsContext.for_test(e2fsprogs=fake)
        """
        from e2fs.core.e2fsprogs.fake import FakeE2fsprogs

        if e2fsprogs is None:
            e2fsprogs = FakeE2fsprogs()

        if config is None:
            config = ClientConfig()

        # Apply dry-run wrapper if needed (matching production behavior)
        if dry_run:
            e2fsprogs = DryRunE2fsprogs(e2fsprogs)

        return E2fsContext(e2fsprogs=e2fsprogs, config=config, dry_run=dry_run, timeout=timeout)


def create_context(
    *,
    dry_run: bool,
    timeout: float | None = None,
    config_store: ConfigStore | None = None,
) -> E2fsContext:
    """Create production context with real implementations.

    A missing config file means defaults; a malformed one raises ValueError.
    A timeout given here is the default for every command and overrides
    the configured one.
    """
    if config_store is None:
        config_store = FilesystemConfigStore()

    config = config_store.load() if config_store.exists() else ClientConfig()

    e2fsprogs: E2fsprogs = RealE2fsprogs(
        search_path=default_search_path(extra_dirs=config.extra_search_dirs),
        timeout=config.timeout,
    )
    if dry_run:
        e2fsprogs = DryRunE2fsprogs(e2fsprogs)

    return E2fsContext(e2fsprogs=e2fsprogs, config=config, dry_run=dry_run, timeout=timeout)
