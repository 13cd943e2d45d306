"""Cheat sheet for the tmux terminal multiplexer.

Single-tool reference: rows carry a command and what it does rather
than a from/to mapping.  Key bindings assume the default ``Ctrl+b``
prefix.
"""

from __future__ import annotations

from toolkata.catalog.rows import CHEATSHEET, CheatSheetRow, RowTable, filter_by_category, search_entries

SLUG = "tmux"

CATEGORIES = frozenset({
    "SESSIONS",
    "WINDOWS",
    "PANES",
    "NAVIGATION",
    "COPY_MODE",
    "CONFIG",
})

CATEGORY_ORDER = (
    "SESSIONS",
    "WINDOWS",
    "PANES",
    "NAVIGATION",
    "COPY_MODE",
    "CONFIG",
)

ROWS = (
    # SESSIONS
    CheatSheetRow("sessions-1", "SESSIONS", "tmux new -s <name>", "Create a new named session"),
    CheatSheetRow("sessions-2", "SESSIONS", "tmux ls", "List all sessions", "Or: tmux list-sessions"),
    CheatSheetRow(
        "sessions-3",
        "SESSIONS",
        "tmux attach -t <name>",
        "Attach to an existing session",
        "Or: tmux attach-session -t <name>",
    ),
    CheatSheetRow(
        "sessions-4",
        "SESSIONS",
        "Ctrl+b d",
        "Detach from current session",
        "Session continues running in background",
    ),
    CheatSheetRow("sessions-5", "SESSIONS", "tmux kill-session -t <name>", "Kill a specific session"),
    CheatSheetRow("sessions-6", "SESSIONS", "Ctrl+b $", "Rename current session", "Prompt appears at bottom"),
    CheatSheetRow(
        "sessions-7",
        "SESSIONS",
        "Ctrl+b s",
        "Show all sessions (interactive)",
        "Navigate and press Enter to attach",
    ),
    # WINDOWS
    CheatSheetRow("windows-1", "WINDOWS", "Ctrl+b c", "Create a new window", "Windows are numbered starting at 0"),
    CheatSheetRow("windows-2", "WINDOWS", "Ctrl+b ,", "Rename current window"),
    CheatSheetRow("windows-3", "WINDOWS", "Ctrl+b n", "Switch to next window"),
    CheatSheetRow("windows-4", "WINDOWS", "Ctrl+b p", "Switch to previous window"),
    CheatSheetRow("windows-5", "WINDOWS", "Ctrl+b 0-9", "Switch to window by number"),
    CheatSheetRow("windows-6", "WINDOWS", "Ctrl+b w", "List all windows (interactive)"),
    CheatSheetRow("windows-7", "WINDOWS", "Ctrl+b &", "Kill current window", "Confirms before killing"),
    CheatSheetRow("windows-8", "WINDOWS", "Ctrl+b f", "Find window by name", "Search prompt appears"),
    # PANES
    CheatSheetRow("panes-1", "PANES", "Ctrl+b %", "Split pane vertically (left/right)"),
    CheatSheetRow("panes-2", "PANES", "Ctrl+b \"", "Split pane horizontally (top/bottom)"),
    CheatSheetRow("panes-3", "PANES", "Ctrl+b o", "Cycle to next pane"),
    CheatSheetRow("panes-4", "PANES", "Ctrl+b arrow keys", "Navigate to pane in direction", "Up, Down, Left, Right"),
    CheatSheetRow("panes-5", "PANES", "Ctrl+b q", "Show pane numbers (短暂显示)", "Press number to jump to pane"),
    CheatSheetRow("panes-6", "PANES", "Ctrl+b z", "Toggle zoom current pane", "Expand to fill window, toggle back"),
    CheatSheetRow("panes-7", "PANES", "Ctrl+b {", "Move pane left (swap)"),
    CheatSheetRow("panes-8", "PANES", "Ctrl+b }", "Move pane right (swap)"),
    CheatSheetRow("panes-9", "PANES", "Ctrl+b x", "Kill current pane", "Confirms before killing"),
    CheatSheetRow(
        "panes-10",
        "PANES",
        "Ctrl+b Ctrl+arrow",
        "Resize pane in direction",
        "Hold Ctrl and press arrow repeatedly",
    ),
    # NAVIGATION
    CheatSheetRow(
        "nav-1",
        "NAVIGATION",
        "Ctrl+b [",
        "Enter scroll mode (copy mode)",
        "Use arrows or vi keys to scroll",
    ),
    CheatSheetRow("nav-2", "NAVIGATION", "Ctrl+b page up/down", "Scroll terminal output", "Without entering copy mode"),
    CheatSheetRow("nav-3", "NAVIGATION", "q or Esc", "Exit copy mode"),
    CheatSheetRow("nav-4", "NAVIGATION", "Ctrl+b :", "Enter command mode", "Type commands at prompt"),
    CheatSheetRow("nav-5", "NAVIGATION", "Ctrl+b ?", "List all key bindings", "Press q to exit list"),
    # COPY MODE
    CheatSheetRow("copy-1", "COPY_MODE", "Ctrl+b [", "Enter copy mode"),
    CheatSheetRow(
        "copy-2",
        "COPY_MODE",
        "Space (start selection)",
        "Begin text selection",
        "Starts copy mode selection",
    ),
    CheatSheetRow(
        "copy-3",
        "COPY_MODE",
        "Enter (copy selection)",
        "Copy selected text",
        "Also: Ctrl+w or y depending on mode",
    ),
    CheatSheetRow("copy-4", "COPY_MODE", "Ctrl+b ]", "Paste copied text", "Paste buffer to current pane"),
    CheatSheetRow("copy-5", "COPY_MODE", "/ (in copy mode)", "Search forward", "Search prompt appears"),
    CheatSheetRow("copy-6", "COPY_MODE", "? (in copy mode)", "Search backward"),
    CheatSheetRow("copy-7", "COPY_MODE", "n (in copy mode)", "Repeat search in same direction"),
    CheatSheetRow("copy-8", "COPY_MODE", "N (in copy mode)", "Repeat search in opposite direction"),
    # CONFIG
    CheatSheetRow("config-1", "CONFIG", "~/.tmux.conf", "Configuration file location", "Create if doesn't exist"),
    CheatSheetRow(
        "config-2",
        "CONFIG",
        "set -g prefix C-a",
        "Change prefix key to Ctrl+a",
        "Add to .tmux.conf, then: source ~/.tmux.conf",
    ),
    CheatSheetRow(
        "config-3",
        "CONFIG",
        "set -g mouse on",
        "Enable mouse support",
        "Click to select panes, drag to resize",
    ),
    CheatSheetRow(
        "config-4",
        "CONFIG",
        "set -g status-bg colour",
        "Set status bar background color",
        "Colours: black, red, green, yellow, blue, magenta, cyan, white",
    ),
    CheatSheetRow(
        "config-5",
        "CONFIG",
        "bind r source-file ~/.tmux.conf \\; display 'Reloaded!'",
        "Reload config with Ctrl+b r",
        "Add to .tmux.conf for quick reload",
    ),
    CheatSheetRow(
        "config-6",
        "CONFIG",
        "set -g base-index 1",
        "Start windows/panes at 1 instead of 0",
        "Makes keyboard shortcuts more ergonomic",
    ),
    CheatSheetRow("config-7", "CONFIG", "set -g status-keys vi", "Use vi key bindings in command mode"),
    CheatSheetRow("config-8", "CONFIG", "setw -g mode-keys vi", "Use vi keys in copy mode", "Default is emacs"),
)

TABLE = RowTable(SLUG, CHEATSHEET, ROWS, categories=CATEGORIES, category_order=CATEGORY_ORDER)


def get_categories() -> list[str]:
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
