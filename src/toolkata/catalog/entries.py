"""Tutorial entry registry: every tool pairing and single-tool guide.

An entry is either a :class:`ToolPairing` ("learn X if you know Y") or a
:class:`SingleToolEntry` ("learn X").  The two are told apart by the
``mode`` tag only; use :func:`is_pairing` / :func:`is_tutorial` before
touching variant-specific fields such as ``from_tool``.

The registry is built once at import time and validated on the way in.
Lookups return ``None`` when nothing matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

from toolkata.catalog.validation import ensure_valid, find_entry_problems

PAIRING = "pairing"
TUTORIAL = "tutorial"
ENTRY_MODES = (PAIRING, TUTORIAL)

PUBLISHED = "published"
COMING_SOON = "coming_soon"
ENTRY_STATUSES = (PUBLISHED, COMING_SOON)

ENTRY_CATEGORIES = (
    "Version Control",
    "Package Management",
    "Build Tools",
    "Frameworks & Libraries",
    "Other",
)

LANGUAGES = ("typescript", "scala", "shell", "other")


@dataclass(frozen=True)
class Tool:
    """Display metadata for one tool."""

    name: str
    description: str
    color: str | None = None
    icon: str | None = None

    def to_dict(self) -> dict:
        out = {"name": self.name, "description": self.description}
        if self.color:
            out["color"] = self.color
        if self.icon:
            out["icon"] = self.icon
        return out


@dataclass(frozen=True)
class ToolPairing:
    """Comparison entry: learn ``to_tool`` coming from ``from_tool``."""

    slug: str
    from_tool: Tool
    to_tool: Tool
    category: str
    steps: int
    estimated_time: str
    status: str
    to_url: str | None = None
    tags: tuple[str, ...] = ()
    language: str | None = None
    mode: str = field(default=PAIRING, init=False)

    @property
    def title(self) -> str:
        return f"{self.to_tool.name} if you know {self.from_tool.name}"

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "slug": self.slug,
            "from": self.from_tool.to_dict(),
            "to": self.to_tool.to_dict(),
            "category": self.category,
            "steps": self.steps,
            "estimated_time": self.estimated_time,
            "status": self.status,
            "to_url": self.to_url,
            "tags": list(self.tags),
            "language": self.language,
        }


@dataclass(frozen=True)
class SingleToolEntry:
    """Single-tool guide: learn ``tool`` on its own."""

    slug: str
    tool: Tool
    category: str
    steps: int
    estimated_time: str
    status: str
    tool_url: str | None = None
    tags: tuple[str, ...] = ()
    language: str | None = None
    mode: str = field(default=TUTORIAL, init=False)

    @property
    def title(self) -> str:
        return self.tool.name

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "slug": self.slug,
            "tool": self.tool.to_dict(),
            "category": self.category,
            "steps": self.steps,
            "estimated_time": self.estimated_time,
            "status": self.status,
            "tool_url": self.tool_url,
            "tags": list(self.tags),
            "language": self.language,
        }


TutorialEntry = Union[ToolPairing, SingleToolEntry]


def is_pairing(entry: TutorialEntry) -> bool:
    """True if *entry* is a two-tool comparison."""
    return entry.mode == PAIRING


def is_tutorial(entry: TutorialEntry) -> bool:
    """True if *entry* is a single-tool guide."""
    return entry.mode == TUTORIAL


def build_registry(entries) -> tuple[TutorialEntry, ...]:
    """Freeze and validate a sequence of entries."""
    entries = tuple(entries)
    problems = find_entry_problems(
        entries,
        modes=ENTRY_MODES,
        categories=ENTRY_CATEGORIES,
        statuses=ENTRY_STATUSES,
        languages=LANGUAGES,
    )
    ensure_valid(problems, "tutorial registry")
    return entries


# ---------------------------------------------------------------------------
# Registry data.  Published pairings: zio-cats, jj-git, effect-zio.
# Published tutorials: tmux.
# ---------------------------------------------------------------------------

TOOL_ENTRIES: tuple[TutorialEntry, ...] = build_registry((
    ToolPairing(
        slug="zio-cats",
        from_tool=Tool("Cats Effect", "Cats Effect 3", color="#8b5cf6", icon="scala"),
        to_tool=Tool("ZIO", "Learn ZIO 2.0", color="#0066ff", icon="scala"),
        category="Frameworks & Libraries",
        steps=15,
        estimated_time="~70 min",
        status=PUBLISHED,
        to_url="https://zio.dev/",
        language="scala",
        tags=("scala", "zio", "cats-effect", "functional"),
    ),
    ToolPairing(
        slug="jj-git",
        from_tool=Tool("git", "Distributed VCS", color="#f05032", icon="git-branch"),
        to_tool=Tool("jj", "jj for git experts", color="#39d96c", icon="arrows-clockwise"),
        category="Version Control",
        steps=12,
        estimated_time="~40 min",
        status=PUBLISHED,
        to_url="https://github.com/jj-vcs/jj",
        language="shell",
        tags=("git", "jj", "vcs", "version-control"),
    ),
    ToolPairing(
        slug="effect-zio",
        from_tool=Tool("ZIO", "ZIO 2", color="#DC322F", icon="scala"),
        to_tool=Tool("Effect", "Effect.TS for ZIO developers", color="#3178C6", icon="typescript"),
        category="Frameworks & Libraries",
        steps=15,
        estimated_time="~75 min",
        status=PUBLISHED,
        to_url="https://effect.website",
        language="typescript",
        tags=("typescript", "effect", "zio", "scala", "functional"),
    ),
    SingleToolEntry(
        slug="tmux",
        tool=Tool("tmux", "Terminal multiplexer", color="#1bbf4e", icon="terminal"),
        category="Other",
        steps=8,
        estimated_time="~30 min",
        status=PUBLISHED,
        tool_url="https://github.com/tmux/tmux",
        language="shell",
        tags=("tmux", "terminal", "multiplexer", "shell"),
    ),
))

_BY_SLUG = MappingProxyType({entry.slug: entry for entry in TOOL_ENTRIES})


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def get_entry(slug: str) -> TutorialEntry | None:
    """Return the entry for *slug*, or None."""
    return _BY_SLUG.get(slug)


def get_published_entries() -> list[TutorialEntry]:
    """Return published entries in registry order."""
    return [entry for entry in TOOL_ENTRIES if entry.status == PUBLISHED]


def get_entries_by_category() -> dict[str, list[TutorialEntry]]:
    """Group all entries by category.

    Groups appear in the order their category is first seen; each group
    keeps registry order.
    """
    grouped: dict[str, list[TutorialEntry]] = {}
    for entry in TOOL_ENTRIES:
        grouped.setdefault(entry.category, []).append(entry)
    return grouped


def is_valid_entry_slug(slug: str) -> bool:
    """True if *slug* names any registry entry."""
    return get_entry(slug) is not None
