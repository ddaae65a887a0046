"""CLI entry point for command-runner."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.markup import escape
from rich.table import Table

import command_runner.io.logging_setup
import command_runner.settings
from command_runner.catalog import Catalog, CatalogError, load_catalog
from command_runner.clipboard import SystemClipboard
from command_runner.executor import ShellRunner
from command_runner.tui.app import CommandRunnerApp

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return version("command-runner")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="command-runner",
        description="Browse a catalog of commands and run them from a terminal menu",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help=(
            "Path to the catalog JSON document "
            f"(default: ${command_runner.settings.CATALOG_ENV_VAR}, the settings file's "
            "catalog_path, or ~/.config/command-runner/commands.json)"
        ),
    )
    parser.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Validate the catalog, print a summary and exit without starting the UI.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def render_summary(catalog: Catalog) -> Table:
    table = Table(title="Catalog")
    table.add_column("Category")
    table.add_column("Items", justify="right")
    table.add_column("Kinds")
    for category in catalog.categories:
        kinds = sorted({item.kind.value for item in category.items})
        table.add_row(category.name, str(len(category.items)), ", ".join(kinds))
    return table


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    # The TUI owns the terminal, so runtime logs go to the log file only.
    runtime = command_runner.io.logging_setup.configure(console=False)
    err_console = Console(stderr=True)

    catalog_path = command_runner.settings.resolve_catalog_path(args.catalog)
    try:
        catalog = load_catalog(catalog_path)
    except CatalogError as e:
        # [LAW:single-enforcer] The only error allowed to stop the program.
        logger.error("Catalog error: %s", e)
        err_console.print(f"[bold red]error:[/] {escape(str(e))}", highlight=False)
        return 1

    if args.check:
        Console().print(render_summary(catalog))
        return 0

    app = CommandRunnerApp(
        catalog,
        runner=ShellRunner(shell=command_runner.settings.load_shell()),
        clipboard=SystemClipboard(command_runner.settings.load_clipboard_command()),
        output_max_lines=command_runner.settings.load_output_max_lines(),
    )
    logger.info("Starting UI (log file: %s)", runtime.file_path)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
