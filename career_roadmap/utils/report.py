"""
Console Report Module

Renders recommendations and analytics with rich for terminal display.

Example Usage:
    from career_roadmap.utils.report import render_recommendation

    render_recommendation(result)
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from career_roadmap.engine.analytics import CareerAnalytics
from career_roadmap.models.recommendation import RECOMMENDATION_FLAGS, RecommendationResult


EMPTY = "-"

FLAG_NOTES = {
    "ambiguous_tag_match": "an interest matched more than one category",
    "fallback_category": "no known category matched; showing general guidance",
    "default_category": "no interests given; showing the default track",
    "no_local_courses": "no teacher-added courses matched yet",
}


def _bullets(console: Console, items: list[str]) -> None:
    if not items:
        console.print(f"  {EMPTY}")
        return
    for item in items:
        console.print(f"  * {escape(item)}")


def render_recommendation(
    result: RecommendationResult, console: Optional[Console] = None
) -> None:
    """
    Print a personalized roadmap.

    Args:
        result: Generated recommendation
        console: Target console (defaults to a new stdout console)
    """
    console = console or Console()

    console.rule("[bold]Personalized Roadmap[/bold]")
    console.print(f"[bold]Primary focus:[/bold] {escape(result.primary_interest) or EMPTY}")
    skills = escape(", ".join(result.skills))
    console.print(f"[bold]Skills to learn:[/bold] {skills or EMPTY}")

    console.print("\n[bold]Roadmap (6 months)[/bold]")
    for i, stage in enumerate(result.roadmap, start=1):
        console.print(f"  {i}. {escape(stage)}")

    console.print("\n[bold]Courses & Resources[/bold]")
    _bullets(console, [f"{c.title} <{c.url}>" for c in result.courses])

    console.print("\n[bold]Project ideas & repos[/bold]")
    _bullets(
        console,
        result.project_ideas + [f"{r.name} <{r.url}>" for r in result.project_repos],
    )

    console.print("\n[bold]Community groups[/bold]")
    _bullets(console, result.community_groups)

    console.print("\n[bold]Hackathons & events[/bold]")
    _bullets(console, [f"{e.title} <{e.url}>" for e in result.events])

    notes = [
        FLAG_NOTES[flag] for flag in sorted(RECOMMENDATION_FLAGS) if result.has_flag(flag)
    ]
    if notes:
        console.print("\n[yellow]Notes:[/yellow]")
        _bullets(console, notes)

    console.print(
        f"\n[dim]Generated at: {result.generated_at.isoformat(timespec='seconds')}[/dim]"
    )


def render_analytics(
    analytics: CareerAnalytics, console: Optional[Console] = None
) -> None:
    """
    Print the analytics summary and recent interactions.

    Args:
        analytics: Summary from engine.analytics.summarize
        console: Target console (defaults to a new stdout console)
    """
    console = console or Console()

    stats = Table(title="Career Analytics")
    stats.add_column("Courses Completed", justify="right")
    stats.add_column("Total Courses", justify="right")
    stats.add_column("Skills Acquired", justify="right")
    stats.add_column("Completion Rate", justify="right")
    stats.add_column("Suggestions Generated", justify="right")
    stats.add_row(
        str(analytics.courses_completed),
        str(analytics.total_courses),
        str(analytics.skills_acquired),
        f"{analytics.completion_rate}%",
        str(analytics.recommendations_generated),
    )
    console.print(stats)

    if not analytics.recent:
        console.print("No recommendations yet")
        return

    recent = Table(title="Recent Career Interactions")
    recent.add_column("When")
    recent.add_column("Interests")
    recent.add_column("Skills suggested")
    for item in analytics.recent:
        recent.add_row(
            item.timestamp.strftime("%Y-%m-%d %H:%M"),
            escape(item.interests) or EMPTY,
            escape(", ".join(item.skills)),
        )
    console.print(recent)
