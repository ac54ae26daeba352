"""Unit tests for ReadmeUpdater orchestrator - mocked fetcher, no internet."""

import shutil
import time
import pytest
import yaml
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, patch

from profilegen.config import GeneratorConfig
from profilegen.core.orchestrator import ReadmeUpdater, render_stored
from profilegen.exceptions import ConfigError, StorageError


FIXTURES_DIR = Path(__file__).parent / "fixtures"
NOW = datetime(2025, 6, 1, 6, 0, tzinfo=timezone.utc)


@pytest.fixture
def kolkata_tz(monkeypatch):
    """Run with a local clock ahead of UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Kolkata")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def config(tmp_path) -> GeneratorConfig:
    profile = tmp_path / "data" / "profile.yaml"
    profile.parent.mkdir()
    shutil.copy(FIXTURES_DIR / "profile.yaml", profile)
    return GeneratorConfig(
        profile_path=str(profile),
        readme_path=str(tmp_path / "README.md"),
        github_token=None,
    )


class TestReadmeUpdaterInit:
    """Test ReadmeUpdater initialization."""

    def test_custom_config(self, config):
        updater = ReadmeUpdater(config)
        assert updater.store.path == Path(config.profile_path)

    @pytest.mark.asyncio
    async def test_context_manager_opens_session(self, config):
        async with ReadmeUpdater(config) as updater:
            assert updater._session is not None
        assert updater._session is None

    @pytest.mark.asyncio
    async def test_run_outside_context_rejected(self, config):
        with pytest.raises(RuntimeError):
            await ReadmeUpdater(config).run()


class TestReadmeUpdaterRun:
    """Full pipeline with mocked remote calls."""

    @pytest.mark.asyncio
    async def test_fresh_stats_scenario(self, config, fake_api):
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api()
            async with ReadmeUpdater(config) as updater:
                result = await updater.run(now=NOW)

        assert mock_fetch.call_count == 3
        assert result.success is True
        assert result.degraded == []
        assert result.document_written and result.profile_saved

        saved = yaml.safe_load(Path(config.profile_path).read_text(encoding="utf-8"))
        assert saved["github_stats"]["followers"] == 8
        assert saved["github_stats"]["total_contributions"] == 310
        assert saved["github_stats"]["last_updated"] == "2025-06-01"
        assert saved["leetcode_stats"]["total_solved"] == 145

        readme = Path(config.readme_path).read_text(encoding="utf-8")
        assert f"{'Total Solved:':<18}145" in readme
        assert "52.30%" in readme
        assert readme == result.document

    @pytest.mark.asyncio
    async def test_leetcode_error_keeps_stored_values(self, config, fake_api):
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api(leetcode="leetcode_error")
            async with ReadmeUpdater(config) as updater:
                result = await updater.run(now=NOW)

        assert result.degraded == ["leetcode_stats"]
        assert result.leetcode_stats.total_solved == 100
        assert result.leetcode_stats.last_updated == "2025-01-01"
        assert result.github_stats.followers == 8

    @pytest.mark.asyncio
    async def test_all_remote_calls_fail(self, config, fake_api):
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api(github=None, leetcode=None, search=None)
            async with ReadmeUpdater(config) as updater:
                result = await updater.run(now=NOW)

        assert result.success is True
        assert result.github_stats.followers == 3
        assert result.github_stats.total_contributions == 150
        assert Path(config.readme_path).exists()

    @pytest.mark.asyncio
    async def test_missing_stats_get_zero_defaults(self, config, fake_api):
        shutil.copy(FIXTURES_DIR / "profile_minimal.yaml", config.profile_path)
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api(github=None, leetcode="leetcode_error", search={})
            async with ReadmeUpdater(config) as updater:
                await updater.run(now=NOW)

        saved = yaml.safe_load(Path(config.profile_path).read_text(encoding="utf-8"))
        assert saved["github_stats"]["followers"] == 0
        assert saved["github_stats"]["total_contributions"] == 0
        assert saved["leetcode_stats"]["total_solved"] == 0
        assert saved["leetcode_stats"]["last_updated"] == "2025-06-01"

    @pytest.mark.asyncio
    async def test_dry_run_writes_nothing(self, config, fake_api):
        before = Path(config.profile_path).read_text(encoding="utf-8")
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api()
            async with ReadmeUpdater(config) as updater:
                result = await updater.run(dry_run=True, now=NOW)

        assert "LIVE METRICS" in result.document
        assert not result.document_written
        assert not Path(config.readme_path).exists()
        assert Path(config.profile_path).read_text(encoding="utf-8") == before

    @pytest.mark.asyncio
    async def test_naive_clock_is_utc_for_stamp_and_footer(self, config, fake_api, kolkata_tz):
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api()
            async with ReadmeUpdater(config) as updater:
                result = await updater.run(dry_run=True, now=datetime(2025, 6, 1, 2, 0))

        assert result.github_stats.last_updated == "2025-06-01"
        assert result.leetcode_stats.last_updated == "2025-06-01"
        assert "Last Updated: 2025-06-01T02:00:00.000Z" in result.document


class TestReadmeUpdaterFatal:
    """Fatal stages abort the run."""

    @pytest.mark.asyncio
    async def test_missing_profile_writes_no_document(self, config):
        Path(config.profile_path).unlink()
        Path(config.readme_path).write_text("previous", encoding="utf-8")

        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            async with ReadmeUpdater(config) as updater:
                with pytest.raises(ConfigError):
                    await updater.run(now=NOW)

        mock_fetch.assert_not_called()
        assert Path(config.readme_path).read_text(encoding="utf-8") == "previous"

    @pytest.mark.asyncio
    async def test_unwritable_readme(self, config, fake_api):
        Path(config.readme_path).mkdir()
        before = Path(config.profile_path).read_text(encoding="utf-8")

        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = fake_api()
            async with ReadmeUpdater(config) as updater:
                with pytest.raises(StorageError):
                    await updater.run(now=NOW)

        # Stats are not persisted when the document could not be published
        assert Path(config.profile_path).read_text(encoding="utf-8") == before


class TestRenderStored:
    """Offline rendering."""

    def test_renders_without_fetching(self, config):
        with patch("profilegen.core.collectors.fetch_json", new_callable=AsyncMock) as mock_fetch:
            document = render_stored(config, now=NOW)

        mock_fetch.assert_not_called()
        assert f"{'Total Solved:':<18}100" in document

    def test_missing_profile(self, config, tmp_path):
        config.profile_path = str(tmp_path / "nope.yaml")
        with pytest.raises(ConfigError):
            render_stored(config)
