"""Reconciliation of fetched stats into the stored profile record."""

from datetime import date, datetime, timezone

from profilegen.models.profile import ProfileRecord
from profilegen.models.stats import GitHubStats, HostStats, LeetCodeStats, PracticeStats


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def reconcile_github_stats(
    stored: GitHubStats | None,
    host: HostStats | None,
    contributions: int,
    stamp: str,
) -> GitHubStats:
    """
    Fresh values replace stored ones; without them the stored record is
    kept as is (contributions default to 0).
    """
    if stored is None:
        stored = GitHubStats(last_updated=stamp)

    if host is None:
        return stored.model_copy(
            update={"total_contributions": stored.total_contributions or 0},
        )

    return stored.model_copy(
        update={
            "followers": host.followers,
            "following": host.following,
            "public_repos": host.public_repos,
            "total_stars": host.total_stars,
            "total_contributions": contributions or 0,
            "last_updated": stamp,
        },
    )


def reconcile_leetcode_stats(
    stored: LeetCodeStats | None,
    practice: PracticeStats | None,
    stamp: str,
) -> LeetCodeStats:
    """Same policy as GitHub; a missing record starts at all zeros."""
    if stored is None:
        stored = LeetCodeStats(last_updated=stamp)

    if practice is None:
        return stored

    return stored.model_copy(
        update={
            "total_solved": practice.total_solved,
            "easy": practice.easy,
            "medium": practice.medium,
            "hard": practice.hard,
            "acceptance_rate": practice.acceptance_rate,
            "last_updated": stamp,
        },
    )


def merge_stats(
    record: ProfileRecord,
    host: HostStats | None,
    practice: PracticeStats | None,
    contributions: int,
    today: date | None = None,
) -> ProfileRecord:
    """
    Merge fetched results into the record in place and return it.

    Both `github_stats` and `leetcode_stats` exist afterwards. A record
    created here because the file had none is stamped with today's date.

    Args:
        record: Loaded profile record
        host: GitHub user stats, None if unavailable
        practice: LeetCode stats, None if unavailable
        contributions: Commit count (0 when unavailable)
        today: UTC date for `last_updated`, defaults to now
    """
    stamp = (today or utc_today()).isoformat()
    record.github_stats = reconcile_github_stats(record.github_stats, host, contributions, stamp)
    record.leetcode_stats = reconcile_leetcode_stats(record.leetcode_stats, practice, stamp)
    return record
