"""Normalization of raw API payloads into stats models."""

from typing import Any

from profilegen.exceptions import PayloadError
from profilegen.models.stats import HostStats, PracticeStats, to_float, to_int


HOST_FIELDS = ("followers", "following", "public_repos")


def parse_host_stats(payload: Any) -> HostStats:
    """
    Extract follower, following and repository counts from a GitHub user.

    `total_stars` mirrors `public_repos`; no per-repository aggregation
    is performed.

    Raises:
        PayloadError: Payload is not a user object
    """
    if not isinstance(payload, dict):
        raise PayloadError("User payload is not a JSON object")
    if not any(field in payload for field in HOST_FIELDS):
        raise PayloadError(payload.get("message") or "User payload has no counts")

    public_repos = to_int(payload.get("public_repos"))
    return HostStats(
        followers=to_int(payload.get("followers")),
        following=to_int(payload.get("following")),
        public_repos=public_repos,
        total_stars=public_repos,
    )


def parse_practice_stats(payload: Any) -> PracticeStats:
    """
    Extract solved counts and acceptance rate from the LeetCode stats API.

    Raises:
        PayloadError: Missing `status: success` marker
    """
    if not isinstance(payload, dict):
        raise PayloadError("Stats payload is not a JSON object")
    if payload.get("status") != "success":
        raise PayloadError(payload.get("message") or "user not found or API error")

    return PracticeStats(
        total_solved=to_int(payload.get("totalSolved")),
        easy=to_int(payload.get("easySolved")),
        medium=to_int(payload.get("mediumSolved")),
        hard=to_int(payload.get("hardSolved")),
        acceptance_rate=to_float(payload.get("acceptanceRate")),
    )


def parse_contribution_count(payload: Any) -> int:
    """
    Extract `total_count` from a commit search result.

    Raises:
        PayloadError: No `total_count` field
    """
    if not isinstance(payload, dict) or payload.get("total_count") is None:
        raise PayloadError("Search payload has no total_count")
    return to_int(payload["total_count"])
