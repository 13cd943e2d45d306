"""Click CLI entry point with lazy-loaded subcommands."""

import logging

import click

from toolkata.config import load_config
from toolkata.exit_codes import EXIT_USAGE, exit_with

# Lazy-loading command group: imports command modules only when invoked.
_COMMANDS = {
    "list":       ("toolkata.commands.cmd_list",       "list_cmd"),
    "show":       ("toolkata.commands.cmd_show",       "show"),
    "categories": ("toolkata.commands.cmd_categories", "categories"),
    "search":     ("toolkata.commands.cmd_search",     "search"),
    "validate":   ("toolkata.commands.cmd_validate",   "validate"),
    "config":     ("toolkata.commands.cmd_config",     "config"),
}

# Command categories for organized --help display
_CATEGORIES = {
    "Catalog": ["list", "show"],
    "Reference tables": ["categories", "search"],
    "Maintenance": ["validate", "config"],
}


class LazyGroup(click.Group):
    """A Click group that lazy-loads command modules on first access."""

    def list_commands(self, ctx):
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx, cmd_name):
        if cmd_name not in _COMMANDS:
            return None
        module_path, attr_name = _COMMANDS[cmd_name]
        import importlib
        mod = importlib.import_module(module_path)
        return getattr(mod, attr_name)

    def format_help(self, ctx, formatter):
        """Categorized help display instead of flat alphabetical list."""
        self.format_usage(ctx, formatter)
        formatter.write("\n")
        if self.help:
            formatter.write(self.help + "\n\n")

        for cat_name, cmds in _CATEGORIES.items():
            formatter.write(f"  {cat_name}:\n")
            for cmd_name in cmds:
                cmd = self.get_command(ctx, cmd_name)
                if cmd is None:
                    continue
                help_text = cmd.get_short_help_str(limit=60)
                formatter.write(f"    {cmd_name:14s} {help_text}\n")
            formatter.write("\n")

        formatter.write("  Run `toolkata <command> --help` for details on any command.\n")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("toolkata").setLevel(getattr(logging, level))


@click.group(cls=LazyGroup)
@click.version_option(package_name="toolkata")
@click.option('--json', 'json_mode', is_flag=True, help='Output in JSON format')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, json_mode, verbose):
    """toolkata: learn a tool through the one you already know."""
    try:
        cfg = load_config()
    except ValueError as exc:
        exit_with(EXIT_USAGE, f"invalid configuration: {exc}")
    _configure_logging("DEBUG" if verbose else cfg["log_level"])
    ctx.ensure_object(dict)
    ctx.obj['json'] = json_mode
    ctx.obj['config'] = cfg
