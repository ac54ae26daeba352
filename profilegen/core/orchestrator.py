"""Pipeline orchestrator - coordinates loading, fetching, merging, rendering."""

from datetime import datetime, timezone

import aiohttp

from profilegen.config import GeneratorConfig
from profilegen.core.collectors import collect_all
from profilegen.core.exporter import summary_dict, write_document
from profilegen.core.merger import merge_stats
from profilegen.exceptions import ProfileGenError
from profilegen.logging import configure_logging, get_logger
from profilegen.models.result import UpdateResult
from profilegen.render.sections import as_utc, render_readme
from profilegen.store.base import ProfileStore
from profilegen.store.yaml_store import YamlProfileStore


class ReadmeUpdater:
    """
    One README update cycle: load, fetch, merge, render, write, persist.

    Example:
        async with ReadmeUpdater() as updater:
            result = await updater.run()
            print(result.leetcode_stats.total_solved)
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        store: ProfileStore | None = None,
    ):
        """
        Initialize updater with optional configuration.

        Args:
            config: GeneratorConfig instance, uses defaults if None
            store: Profile store, a YamlProfileStore on `config.profile_path` if None
        """
        self.config = config or GeneratorConfig()
        self.store = store or YamlProfileStore(self.config.profile_path)
        self._session: aiohttp.ClientSession | None = None
        self._log = get_logger("updater")

    async def __aenter__(self) -> "ReadmeUpdater":
        """Async context manager entry - open the HTTP session."""
        configure_logging(self.config)
        timeout = aiohttp.ClientTimeout(total=self.config.request_timeout_seconds or None)
        self._session = aiohttp.ClientSession(timeout=timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def run(self, dry_run: bool = False, now: datetime | None = None) -> UpdateResult:
        """
        Run the full update pipeline.

        The document is rendered and written before the profile is saved,
        so stored stats are never newer than the published README.

        Args:
            dry_run: Render only; write neither the README nor the profile
            now: Clock override for the date stamps and footer

        Returns:
            UpdateResult describing the run

        Raises:
            ConfigError: Profile missing or invalid
            StorageError: README or profile could not be written
        """
        if self._session is None:
            raise RuntimeError("ReadmeUpdater must be used as an async context manager")

        started = datetime.now(timezone.utc)
        now = as_utc(now or started)
        self._log.info("update_start", profile_path=self.config.profile_path, dry_run=dry_run)

        try:
            record = self.store.load()

            collected = await collect_all(self._session, self.config)
            merge_stats(
                record,
                collected.host,
                collected.practice,
                collected.contributions,
                today=now.date(),
            )

            document = render_readme(record, now)
            document_written = profile_saved = False
            if not dry_run:
                write_document(document, self.config.readme_path)
                document_written = True
                self._log.info("readme_written", path=self.config.readme_path)
                self.store.save(record)
                profile_saved = True
        except ProfileGenError as e:
            self._log.error("update_failed", error=str(e), error_type=type(e).__name__)
            raise

        result = UpdateResult(
            success=True,
            github_stats=record.github_stats,
            leetcode_stats=record.leetcode_stats,
            degraded=collected.degraded,
            profile_path=self.config.profile_path,
            readme_path=self.config.readme_path,
            document_written=document_written,
            profile_saved=profile_saved,
            document=document,
            started_at=started,
            duration_ms=(datetime.now(timezone.utc) - started).total_seconds() * 1000,
        )
        self._log.info("update_complete", degraded=result.degraded, **summary_dict(result))
        return result


def render_stored(
    config: GeneratorConfig | None = None,
    store: ProfileStore | None = None,
    now: datetime | None = None,
) -> str:
    """Render the README from stored profile data without fetching."""
    config = config or GeneratorConfig()
    store = store or YamlProfileStore(config.profile_path)
    return render_readme(store.load(), now)
