"""Main CLI interface for fsmaint using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from ..config import ConfigManager, FsMaintConfig
from ..errors import UsageError
from ..mover import ConfirmationPrompt, FileMover, MoveOptions
from ..remover import DirectoryRemover, batch_exit_code
from ..utils.logging import FSMAINT_THEME, get_logger, setup_logging

# Arguments are file names: no emoji codes, no highlighting, no wrapping
console = Console(theme=FSMAINT_THEME, soft_wrap=True, highlight=False, emoji=False)
err_console = Console(
    theme=FSMAINT_THEME, soft_wrap=True, highlight=False, emoji=False, stderr=True
)
logger = get_logger(__name__)

# Commands read their own flags from the raw argument list; click only
# handles --help and the usage line.
COMMAND_SETTINGS = {
    "allow_interspersed_args": False,
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}
RAW_ARGS = "fsmaint.raw_args"

MOVE_FLAGS = {"-f": "force", "-i": "interactive", "-v": "verbose"}


class CoreutilCommand(click.Command):
    """Command that keeps its untouched argument list for hand parsing."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS] = list(args)
        return super().parse_args(ctx, args)


def parse_move_arguments(
    args: list[str], ctx: click.Context | None = None
) -> tuple[MoveOptions, str, str]:
    """
    Split mv arguments into flags, source and destination.

    Flags are read while arguments start with "-"; each must be exactly one
    of -f, -i or -v. Positionals past the first two are ignored.

    Args:
        args: Arguments after the command name
        ctx: Click context used to print the usage line on error

    Returns:
        Tuple of (options, source, destination)

    Raises:
        UsageError: On an unknown flag or fewer than two positionals
    """
    flags = {}
    index = 0
    while index < len(args) and args[index].startswith("-"):
        name = MOVE_FLAGS.get(args[index])
        if name is None:
            raise UsageError(f"Unknown flag: {args[index]}", ctx=ctx)
        flags[name] = True
        index += 1

    positionals = args[index:]
    if len(positionals) < 2:
        raise UsageError("Expected SRC and DST", ctx=ctx)
    if len(positionals) > 2:
        logger.debug(f"Ignoring extra arguments: {positionals[2:]}")
    return MoveOptions(**flags), positionals[0], positionals[1]


def parse_remove_arguments(
    args: list[str], ctx: click.Context | None = None
) -> tuple[bool, list[str]]:
    """
    Split rmdir arguments into the verbose flag and the directories.

    Only a leading -v is a flag; every other argument is a path.

    Raises:
        UsageError: If no directory is given
    """
    verbose = bool(args) and args[0] == "-v"
    paths = args[1:] if verbose else list(args)
    if not paths:
        raise UsageError("Expected at least one DIR", ctx=ctx)
    return verbose, paths


def _load_config(ctx: click.Context) -> FsMaintConfig:
    """Load configuration and set up logging for a command."""
    obj = ctx.find_object(dict) or {}

    try:
        config = ConfigManager(obj.get("config_path")).load()
    except (OSError, ValueError) as e:
        err_console.print(f"{ctx.info_name}: {escape(str(e))}", style="error")
        sys.exit(1)

    setup_logging(
        level=obj.get("log_level") or config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )
    logger.debug(f"Configuration: {config.model_dump()}")
    return config


@click.group()
@click.version_option(version="0.1.0", prog_name="fsmaint")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured logging level",
)
@click.pass_context
def cli(ctx, config: Optional[Path], log_level: Optional[str]):
    """
    fsmaint - file-system maintenance commands.

    Move files with hard-link replace semantics and remove empty directories.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["log_level"] = log_level


@cli.command(
    name="mv",
    cls=CoreutilCommand,
    context_settings=COMMAND_SETTINGS,
    options_metavar="[-f] [-i] [-v] SRC DST",
)
@click.pass_context
def mv_command(ctx):
    """
    Move or rename SRC to DST.

    If DST is an existing directory the file is moved into it under its own
    name. Directories cannot be moved.

    \b
      -f  overwrite an existing destination without asking
      -i  ask before overwriting (ignored with -f)
      -v  print 'SRC' -> 'DST' after the move
    """
    options, source, destination = parse_move_arguments(ctx.meta[RAW_ARGS], ctx)
    config = _load_config(ctx)

    mover = FileMover(
        max_path=config.paths.max_path,
        confirm=ConfirmationPrompt(console=console),
    )
    result = mover.move(source, destination, options)

    if result.declined:
        console.print("not overwritten")
        return

    if result.error is not None:
        style = "warning" if getattr(result.error, "warning", False) else "error"
        err_console.print(f"mv: {escape(str(result.error))}", style=style)
        sys.exit(result.exit_code)

    if result.overwritten:
        console.print(
            f"mv: '{escape(result.final_destination)}' overwritten with '{escape(source)}'",
            style="warning",
        )

    if options.verbose:
        console.print(f"'{escape(source)}' -> '{escape(result.final_destination)}'")


@cli.command(
    name="rmdir",
    cls=CoreutilCommand,
    context_settings=COMMAND_SETTINGS,
    options_metavar="[-v] DIR [DIR...]",
)
@click.pass_context
def rmdir_command(ctx):
    """
    Remove each empty directory DIR.

    Every DIR is handled on its own; the exit status is 1 if any of them
    could not be removed. A leading -v prints a line per removed directory.
    """
    verbose, directories = parse_remove_arguments(ctx.meta[RAW_ARGS], ctx)
    _load_config(ctx)

    results = DirectoryRemover().remove_all(directories)

    for result in results:
        if result.error is not None:
            err_console.print(f"rmdir: {escape(str(result.error))}", style="error")
        elif verbose:
            console.print(f"rmdir: removed directory '{escape(result.path)}'", style="success")

    exit_code = batch_exit_code(results)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    cli()
