"""Stat collectors: one remote fetch each, degrading instead of failing."""

import asyncio
from dataclasses import dataclass, field
from urllib.parse import quote

import aiohttp

from profilegen.config import GeneratorConfig
from profilegen.core.fetcher import fetch_json
from profilegen.core.transformer import (
    parse_contribution_count,
    parse_host_stats,
    parse_practice_stats,
)
from profilegen.exceptions import PayloadError, TransportError
from profilegen.logging import get_logger
from profilegen.models.stats import HostStats, PracticeStats


_log = get_logger("collectors")


@dataclass(frozen=True)
class CollectedStats:
    """Joined outcome of the three collectors."""

    host: HostStats | None
    practice: PracticeStats | None
    contributions: int
    degraded: list[str] = field(default_factory=list)


async def collect_github_stats(
    session: aiohttp.ClientSession,
    config: GeneratorConfig,
) -> HostStats | None:
    """Fetch follower/following/repository counts, or None on any failure."""
    url = f"{config.github_api_url.rstrip('/')}/users/{quote(config.github_username)}"
    _log.info("github_stats_fetch", username=config.github_username)

    try:
        payload = await fetch_json(session, url, config.github_headers(), config.user_agent)
        if payload is None:
            raise PayloadError("Response body is not JSON")
        stats = parse_host_stats(payload)
    except (TransportError, PayloadError) as e:
        _log.warning("github_stats_unavailable", username=config.github_username, error=str(e))
        return None

    _log.info("github_stats_fetched", followers=stats.followers, public_repos=stats.public_repos)
    return stats


async def collect_leetcode_stats(
    session: aiohttp.ClientSession,
    config: GeneratorConfig,
) -> PracticeStats | None:
    """Fetch solved counts from the unauthenticated stats API, or None."""
    url = f"{config.leetcode_api_url.rstrip('/')}/{quote(config.leetcode_username)}"
    _log.info("leetcode_stats_fetch", username=config.leetcode_username)

    try:
        payload = await fetch_json(session, url, user_agent=config.user_agent)
        if payload is None:
            raise PayloadError("Response body is not JSON")
        stats = parse_practice_stats(payload)
    except (TransportError, PayloadError) as e:
        _log.warning("leetcode_stats_unavailable", username=config.leetcode_username, error=str(e))
        return None

    _log.info("leetcode_stats_fetched", total_solved=stats.total_solved)
    return stats


async def collect_contributions(
    session: aiohttp.ClientSession,
    config: GeneratorConfig,
) -> int:
    """Count commits authored by the user; 0 when unavailable."""
    query = quote(f"author:{config.github_username}")
    url = f"{config.github_api_url.rstrip('/')}/search/commits?q={query}"
    _log.info("contributions_fetch", username=config.github_username)

    try:
        payload = await fetch_json(session, url, config.github_headers(), config.user_agent)
        count = parse_contribution_count(payload)
    except (TransportError, PayloadError) as e:
        _log.warning("contributions_unavailable", username=config.github_username, error=str(e))
        return 0

    _log.info("contributions_fetched", total_count=count)
    return count


async def collect_all(
    session: aiohttp.ClientSession,
    config: GeneratorConfig,
) -> CollectedStats:
    """
    Run the three collectors concurrently and wait for all of them.

    A collector that raises something unexpected is reported and replaced
    by its default so it cannot abort the others.
    """
    outcomes = await asyncio.gather(
        collect_github_stats(session, config),
        collect_leetcode_stats(session, config),
        collect_contributions(session, config),
        return_exceptions=True,
    )

    names = ("github_stats", "leetcode_stats", "contributions")
    defaults = (None, None, 0)
    settled = []
    degraded = []
    for name, outcome, default in zip(names, outcomes, defaults):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            _log.error("collector_crashed", collector=name, error=repr(outcome))
            outcome = default
            degraded.append(name)
        elif outcome is None:
            degraded.append(name)
        settled.append(outcome)

    host, practice, contributions = settled
    return CollectedStats(
        host=host,
        practice=practice,
        contributions=contributions,
        degraded=degraded,
    )
