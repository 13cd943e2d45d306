"""Command reference for jj, mapped from the git commands it replaces."""

from __future__ import annotations

from toolkata.catalog.rows import GLOSSARY, GlossaryRow, RowTable, filter_by_category, search_entries

SLUG = "jj-git"

CATEGORIES = frozenset({
    "BASICS",
    "COMMITS",
    "HISTORY",
    "BRANCHES",
    "REMOTES",
    "UNDO",
    "CONFLICTS",
    "ADVANCED",
})

CATEGORY_ORDER = (
    "BASICS",
    "COMMITS",
    "HISTORY",
    "BRANCHES",
    "REMOTES",
    "UNDO",
    "CONFLICTS",
    "ADVANCED",
)

ROWS = (
    # BASICS
    GlossaryRow("basics-1", "BASICS", "git init", "jj git init"),
    GlossaryRow("basics-2", "BASICS", "git clone <url>", "jj git clone <url>"),
    GlossaryRow("basics-3", "BASICS", "git status", "jj status (jj st)"),
    GlossaryRow("basics-4", "BASICS", "git log", "jj log"),
    GlossaryRow("basics-5", "BASICS", "git diff", "jj diff"),
    GlossaryRow("basics-6", "BASICS", "git diff --staged", "jj diff --from @-", "No staging area in jj"),
    # COMMITS
    GlossaryRow(
        "commits-1",
        "COMMITS",
        'git add . && git commit -m "msg"',
        'jj describe -m "msg"',
        "Changes auto-tracked",
    ),
    GlossaryRow("commits-2", "COMMITS", "git commit --amend", "jj describe (on @)", "Edit working commit"),
    GlossaryRow("commits-3", "COMMITS", "(start new work)", "jj new", "Creates new working commit"),
    GlossaryRow("commits-4", "COMMITS", "git checkout <commit>", "jj new <commit>", "Create new commit at parent"),
    GlossaryRow(
        "commits-5",
        "COMMITS",
        "git checkout <commit> (edit)",
        "jj edit <commit>",
        "Make commit the working copy",
    ),
    # HISTORY
    GlossaryRow("history-1", "HISTORY", "git rebase -i (fixup)", "jj squash", "Squash into parent"),
    GlossaryRow("history-2", "HISTORY", "git rebase -i (split)", "jj split", "Interactive split"),
    GlossaryRow("history-3", "HISTORY", "git rebase <onto>", "jj rebase -d <onto>", "Descendants auto-rebase"),
    GlossaryRow(
        "history-4",
        "HISTORY",
        "git cherry-pick <commit>",
        "jj new <parent>; jj squash --from <source>",
        "Two-step process",
    ),
    GlossaryRow("history-5", "HISTORY", "git show <commit>", "jj show <commit>"),
    # BRANCHES → BOOKMARKS
    GlossaryRow("branches-1", "BRANCHES", "git branch <name>", "jj bookmark create <name>", "jj uses bookmarks"),
    GlossaryRow(
        "branches-2",
        "BRANCHES",
        "git checkout -b <name>",
        "jj new; jj bookmark create <name>",
        "No current branch concept",
    ),
    GlossaryRow("branches-3", "BRANCHES", "git branch -d <name>", "jj bookmark delete <name>"),
    GlossaryRow("branches-4", "BRANCHES", "git branch -m <old> <new>", "jj bookmark rename <old> <new>"),
    GlossaryRow("branches-5", "BRANCHES", "git branch", "jj bookmark list"),
    # REMOTES
    GlossaryRow("remotes-1", "REMOTES", "git fetch", "jj git fetch"),
    GlossaryRow("remotes-2", "REMOTES", "git push", "jj git push", "Requires bookmark"),
    GlossaryRow(
        "remotes-3",
        "REMOTES",
        "git push -u origin <branch>",
        "jj git push -b <bookmark>",
        "jj requires bookmark name",
    ),
    GlossaryRow(
        "remotes-4",
        "REMOTES",
        "git pull",
        "jj git fetch; jj rebase -d <bookmark>@origin",
        "No pull, use fetch+rebase",
    ),
    # UNDO
    GlossaryRow("undo-1", "UNDO", "git reflog; git reset --hard", "jj undo", "Undo last operation"),
    GlossaryRow("undo-2", "UNDO", "(see operation history)", "jj op log", "View all operations"),
    GlossaryRow("undo-3", "UNDO", "git reset --hard <commit>", "jj op restore <operation>", "Restore to any operation"),
    GlossaryRow(
        "undo-4",
        "UNDO",
        "git revert <commit>",
        'jj new <commit>; jj new; jj describe -m "Revert"',
        "Manual revert process",
    ),
    # CONFLICTS
    GlossaryRow("conflicts-1", "CONFLICTS", "git status (see conflicts)", "jj status", "Conflicts stored in commit"),
    GlossaryRow("conflicts-2", "CONFLICTS", "git add <resolved>", "jj resolve", "Mark conflict resolved"),
    GlossaryRow("conflicts-3", "CONFLICTS", "(view conflicts)", "jj resolve --list", "List all conflicts"),
    # ADVANCED
    GlossaryRow("advanced-1", "ADVANCED", "git log --graph --oneline", "jj log --graph"),
    GlossaryRow(
        "advanced-2",
        "ADVANCED",
        "(find commits to rebase)",
        "jj log -r 'main..@'",
        "Revset: commits since main",
    ),
    GlossaryRow("advanced-3", "ADVANCED", "git describe", "jj describe", "Show full change id"),
)

TABLE = RowTable(SLUG, GLOSSARY, ROWS, categories=CATEGORIES, category_order=CATEGORY_ORDER)


def get_categories() -> list[str]:
    """Categories used by the jj/git glossary, in display order."""
    return TABLE.get_categories()


__all__ = [
    "CATEGORIES",
    "CATEGORY_ORDER",
    "ROWS",
    "SLUG",
    "TABLE",
    "filter_by_category",
    "get_categories",
    "search_entries",
]
