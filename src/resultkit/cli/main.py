# topmark:header:start
#
#   project      : ResultKit
#   file         : main.py
#   file_relpath : src/resultkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``resultkit`` command.

Group-level options are resolved once and placed into ``ctx.obj``:

* ``console``: the `ClickConsole` used for program output;
* ``verbosity_level``: ``-v`` count minus ``-q`` count;
* ``config``: the merged, frozen `Config`;
* ``world``: created lazily by `resultkit.cli.cmd_common.get_world`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from resultkit.cli.commands.convert import convert_command
from resultkit.cli.commands.formats import formats_command
from resultkit.cli.commands.guess import guess_command
from resultkit.cli.commands.literal import literal_command
from resultkit.cli.commands.version import version_command
from resultkit.cli.console import ClickConsole
from resultkit.cli.errors import ResultKitConfigError
from resultkit.cli.options import common_verbose_options, resolve_verbosity
from resultkit.config.logging import (
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from resultkit.config.model import Config, MutableConfig
from resultkit.errors import ConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    config_files: tuple[Path, ...],
    no_config: bool,
    no_color: bool,
) -> None:
    """Initialize shared state (console, verbosity, config, logging) on the Click context.

    The log level is taken from ``-v``/``-q`` if given, else from
    ``RESULTKIT_LOG_LEVEL``, else from ``[logging] level``, else WARNING.

    Raises:
        ResultKitConfigError: If a configuration file is unreadable or malformed.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    ctx.obj["verbosity_level"] = verbose - quiet

    level_cli: int | None = resolve_verbosity(verbose, quiet)
    setup_logging(
        level=level_cli or resolve_env_log_level() or logging.WARNING, color=not no_color
    )

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise ResultKitConfigError(str(exc)) from exc
    config: Config = draft.freeze()
    ctx.obj["config"] = config

    if level_cli is None and resolve_env_log_level() is None and config.log_level:
        setup_logging(level=parse_log_level(config.log_level), color=not no_color)
    logger.debug("Effective configuration: %s", config)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ResultKit: query result formats and XSD literals.",
)
@common_verbose_options
@click.option(
    "--config",
    "config_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="Additional TOML config file (may be given more than once).",
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore resultkit.toml and pyproject.toml in the working directory.",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in program output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_files: tuple[Path, ...],
    no_config: bool,
    no_color: bool,
) -> None:
    """Entry point for the ResultKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        config_files=config_files,
        no_config=no_config,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'resultkit formats' to list the available result formats.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(formats_command)

cli.add_command(guess_command)

cli.add_command(convert_command)

cli.add_command(literal_command)

if __name__ == "__main__":
    cli()
