"""Section builders for the matrix-style README."""

from datetime import datetime, timezone

from profilegen.models.profile import (
    Goals,
    Mission,
    ProfileInfo,
    ProfileRecord,
    Project,
    Social,
    TechStack,
)
from profilegen.models.stats import GitHubStats, LeetCodeStats
from profilegen.render.layout import (
    CONTENT_WIDTH,
    box,
    double_bottom,
    double_row,
    double_top,
    fitted_row,
    item_rows,
    join_items,
    label_row,
    row,
    stat_row,
    text,
    truncate,
)


BANNER_ART = [
    "  ██╗    ██╗███████╗██╗      ██████╗ ██████╗ ███╗   ███╗███████╗███████╗",
    "  ██║    ██║██╔════╝██║     ██╔════╝██╔═══██╗████╗ ████║██╔════╝██╔════╝",
    "  ██║ █╗ ██║█████╗  ██║     ██║     ██║   ██║██╔████╔██║█████╗  █████╗",
    "  ██║███╗██║██╔══╝  ██║     ██║     ██║   ██║██║╚██╔╝██║██╔══╝  ██╔══╝",
    "  ╚███╔███╔╝███████╗███████╗╚██████╗╚██████╔╝██║ ╚═╝ ██║███████╗███████╗",
    "   ╚══╝╚══╝ ╚══════╝╚══════╝ ╚═════╝ ╚═════╝ ╚═╝     ╚═╝╚══════╝╚══════╝",
]

DESCRIPTION_BUDGET = 52
NOT_AVAILABLE = "N/A"
DEFAULT_MISSION = Mission(status="Unknown", mode="Learning", next_level="Keep improving")


def banner(profile: ProfileInfo) -> list[str]:
    name = text(profile.name)
    welcome = f"Welcome to {name}'s GitHub Matrix" if name else "Welcome to the GitHub Matrix"
    return [
        double_top(),
        double_row(),
        *(double_row(line) for line in BANNER_ART),
        double_row(),
        double_row(welcome.center(CONTENT_WIDTH).rstrip()),
        double_row(),
        double_bottom(),
    ]


def profile_box(profile: ProfileInfo) -> list[str]:
    return box("👤", "PROFILE MATRIX", [
        label_row("Name:", profile.name),
        label_row("Title:", profile.title),
        label_row("Location:", profile.location),
        label_row("Age:", profile.age),
        label_row("Timezone:", profile.timezone),
        label_row("Status:", "🟢 Online 24/7"),
        row(),
        fitted_row("  Tagline: ", f'"{text(profile.tagline)}"'),
        row(),
    ])


def tech_box(tech: TechStack) -> list[str]:
    return box("🛠️", "TECH ARSENAL", [
        label_row("Languages:", join_items(tech.languages)),
        label_row("Frontend:", join_items(tech.frontend)),
        label_row("Backend:", join_items(tech.backend)),
        label_row("Databases:", join_items(tech.databases)),
        label_row("Tools:", join_items(tech.tools)),
        row(),
    ])


def metrics_box(github: GitHubStats, leetcode: LeetCodeStats) -> list[str]:
    return box("📊", "LIVE METRICS (Updated Daily)", [
        row("  ╭─ GITHUB STATS"),
        stat_row("Followers:", github.followers),
        stat_row("Following:", github.following),
        stat_row("Repositories:", github.public_repos),
        stat_row("Contributions:", github.total_contributions),
        row(f"  ╰─ Last Updated: {text(github.last_updated, NOT_AVAILABLE)}"),
        row(),
        row("  ╭─ LEETCODE STATS"),
        stat_row("Total Solved:", leetcode.total_solved),
        stat_row("Easy:", leetcode.easy),
        stat_row("Medium:", leetcode.medium),
        stat_row("Hard:", leetcode.hard),
        stat_row("Acceptance Rate:", f"{leetcode.acceptance_rate:.2f}%"),
        row(f"  ╰─ Last Updated: {text(leetcode.last_updated, NOT_AVAILABLE)}"),
        row(),
    ])


def mission_box(mission: Mission) -> list[str]:
    return box("🚀", "CURRENT MISSION STATUS", [
        label_row("Status:", mission.status),
        label_row("Mode:", mission.mode),
        row(),
        row("  Weapons Arsenal:"),
        *item_rows(mission.weapons, "⚡"),
        row(),
        row("  Known Weaknesses:"),
        *item_rows(mission.weaknesses, "⚠️ "),
        row(),
        label_row("Next Level:", mission.next_level),
        row(),
    ])


def project_rows(index: int, project: Project) -> list[str]:
    description = truncate(text(project.description), DESCRIPTION_BUDGET)
    return [
        fitted_row(f"  {index}. ", text(project.name)),
        fitted_row("     Description: ", description),
        fitted_row("     Tech Stack:  ", join_items(project.tech)),
        fitted_row("     Status:      ", text(project.status)),
        row(),
    ]


def projects_box(projects: list[Project]) -> list[str]:
    body = []
    for index, project in enumerate(projects, start=1):
        body.extend(project_rows(index, project))
    return box("📁", "CURRENT PROJECTS", body)


def goals_box(goals: Goals) -> list[str]:
    return box("🎯", "GOALS & ASPIRATIONS", [
        row("  Short Term:"),
        *item_rows(goals.short_term, "✓"),
        row(),
        row("  Long Term:"),
        *item_rows(goals.long_term, "★"),
        row(),
    ])


def social_box(social: Social) -> list[str]:
    return box("📞", "CONNECT & COLLABORATE", [
        label_row("GitHub:", social.github, NOT_AVAILABLE),
        label_row("LinkedIn:", social.linkedin, NOT_AVAILABLE),
        label_row("Twitter:", social.twitter, NOT_AVAILABLE),
        label_row("Email:", social.email, NOT_AVAILABLE),
        label_row("Portfolio:", social.portfolio, NOT_AVAILABLE),
        row(),
        row("  Let's collaborate on building scalable systems! 🚀"),
        row(),
    ])


def as_utc(now: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def format_timestamp(now: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2025-01-01T06:00:00.000Z."""
    stamp = as_utc(now).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def footer(profile: ProfileInfo, now: datetime) -> list[str]:
    lines = [
        double_top(),
        double_row(f"  Last Updated: {format_timestamp(now)}"),
        double_row("  Auto-updated daily via GitHub Actions"),
        double_row(),
    ]
    motto = text(profile.motto or profile.tagline)
    if motto:
        name = text(profile.name)
        quote = f'"{motto}" - {name}' if name else f'"{motto}"'
        lines.append(double_row(f"  {quote}"))
    lines.append(double_bottom())
    return lines


def render_readme(record: ProfileRecord, now: datetime | None = None) -> str:
    """
    Render the full README for a profile record.

    Pure apart from the clock: pass `now` for a reproducible document.

    Args:
        record: Merged profile record
        now: Render time shown in the footer, defaults to current UTC time

    Returns:
        README text wrapped in a ```yml fence
    """
    if now is None:
        now = datetime.now(timezone.utc)

    profile = record.profile or ProfileInfo()
    sections = [
        banner(profile),
        profile_box(profile),
        tech_box(record.tech_stack or TechStack()),
        metrics_box(record.github_stats or GitHubStats(), record.leetcode_stats or LeetCodeStats()),
        mission_box(record.current_mission or DEFAULT_MISSION),
        projects_box(record.projects()),
        goals_box(record.goals or Goals()),
        social_box(record.social or Social()),
        footer(profile, now),
    ]
    body = "\n\n".join("\n".join(lines) for lines in sections)
    return f"```yml\n\n{body}\n\n```"
