from toolkata.cli import cli

cli()
