# cli/main.py
"""Main CLI entry point for ProcessArchitec."""

import click

from processarchitec import __version__


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', default=None, help='Override the configured log level')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON lines')
@click.pass_context
def cli(ctx, log_level, json_logs):
    """ProcessArchitec CLI - Generate importable automation workflows."""
    from processarchitec.config import get_settings
    from processarchitec.utils.logging import setup_logging

    settings = get_settings()
    setup_logging(log_level or settings.log_level, json_logs or settings.log_json)
    ctx.obj = settings


def register_commands():
    """Register all CLI commands."""
    from cli.commands.generate import generate, providers
    cli.add_command(generate)
    cli.add_command(providers)

    from cli.commands.server import serve
    cli.add_command(serve)


register_commands()


if __name__ == '__main__':
    cli()
