"""
CI Lark Notification CLI

Sends the result of the current CI pipeline run to a Lark webhook.

Usage:
    lark-notify [OPTIONS]

Settings are read from PLUGIN_* and CI_* environment variables
(and a .env file in the working directory, if present).
"""

import logging
import os
import sys

import click
from dotenv import load_dotenv

from ..config import NotificationContext, PluginConfig
from ..exceptions import NotifierError
from ..notify import notify
from ..sentry import capture_exception, init_sentry

logger = logging.getLogger(__name__)


def setup_logging(level: int):
    """Configure logging to output to stdout."""
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def _log_level(config: PluginConfig, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    level = logging.getLevelName(config.log_level)
    return level if isinstance(level, int) else logging.INFO


def _report_failure(error: NotifierError, context: NotificationContext) -> None:
    """Send a fatal error to Sentry without affecting the exit code."""
    try:
        capture_exception(error, tags={
            "repo": context.repo,
            "branch": context.branch,
            "error_type": type(error).__name__,
        })
    except Exception as e:
        logger.debug("Failed to report error to Sentry: %s", e)


@click.command()
@click.option('--debug', is_flag=True, help='Print environment and payload (same as PLUGIN_DEBUG=true)')
@click.option('--dry-run', is_flag=True, help='Build the message without sending it')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, debug, dry_run, verbose, quiet):
    """Notify a Lark webhook about the outcome of a CI pipeline."""
    load_dotenv()

    environ = dict(os.environ)
    config = PluginConfig.from_env(environ)
    if debug:
        config.debug = True

    setup_logging(_log_level(config, verbose, quiet))
    init_sentry(config)

    context = NotificationContext.from_env(environ)

    try:
        notify(config, context, environ, echo=click.echo, dry_run=dry_run)
    except NotifierError as e:
        click.echo(click.style(str(e), fg='red'), err=True)
        _report_failure(e, context)
        ctx.exit(1)


if __name__ == '__main__':
    cli()
