"""Command-line entry point for crego."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from crego.components_cmd import run_components_list, run_components_show
from crego.output import format_public_component_categories

_ROOT_LONG = """crego is a TUI-first Go project generator.

It is interactive by default, deterministic by recipe, and scriptable for CI."""

_ROOT_EXAMPLE = """examples:
  crego components list
  crego components show server.chi
  crego version"""

_COMPONENTS_LONG = """Explore available project components.

Components describe selectable project capabilities such as HTTP servers,
databases, telemetry, containerization, and CI setup."""

_COMPONENTS_EXAMPLE = """examples:
  crego components list
  crego components list --category server
  crego components show server.chi"""

_LIST_LONG = """List available crego components.

Components are grouped by category. Database framework components are displayed
under orm_framework because they are selected as part of SQL database setup."""

_LIST_EXAMPLE = """examples:
  crego components list
  crego components list --category server
  crego components list --category sql_database
  crego components list --category nosql_database
  crego components list --json"""

_SHOW_LONG = """Show details for a crego component.

Details include compatibility metadata, planned files, Go modules, and hooks."""

_SHOW_EXAMPLE = """examples:
  crego components show server.chi
  crego components show server.gin
  crego components show database.postgres
  crego components show database.framework.gorm --json"""

_VERSION_LONG = """Print crego build information.

The output includes the semantic version, commit identifier, and build time."""

_VERSION_EXAMPLE = """examples:
  crego version"""


@dataclass(frozen=True)
class VersionInfo:
    """Build metadata printed by the version command."""

    version: str = "dev"
    commit: str = "unknown"
    built: str = "unknown"


class CommandError(Exception):
    """A command failure carrying a process exit code."""

    def __init__(self, message: str, exit_code: int = 1, handled: bool = False) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.handled = handled


class _HelpRequested(Exception):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class _Parser(argparse.ArgumentParser):
    def print_help(self, file=None):  # noqa: D401 - argparse hook
        raise _HelpRequested(self.format_help())

    def error(self, message):
        raise CommandError(message)


def _command_errors(err: BaseException | None):
    while err is not None:
        yield err
        err = err.__cause__


def exit_code(err: BaseException | None) -> int:
    """Return the process exit code that err stands for."""
    if err is None:
        return 0
    for current in _command_errors(err):
        if isinstance(current, CommandError):
            return current.exit_code
    return 1


def should_print_error(err: BaseException | None) -> bool:
    """Report whether err still has to be shown to the user."""
    if err is None:
        return False
    for current in _command_errors(err):
        if isinstance(current, CommandError):
            return not current.handled
    return True


def _normalize(info: VersionInfo | None) -> VersionInfo:
    info = info or VersionInfo()
    return dataclasses.replace(
        info,
        version=info.version or "dev",
        commit=info.commit or "unknown",
        built=info.built or "unknown",
    )


def version_line(info: VersionInfo | None) -> str:
    """Return the text printed by the version command."""
    info = _normalize(info)
    return f"version: {info.version}\ncommit: {info.commit}\nbuilt: {info.built}\n"


def _add_global_flags(parser: argparse.ArgumentParser, *, inherited: bool) -> None:
    def default(value):
        return argparse.SUPPRESS if inherited else value

    parser.add_argument(
        "--no-color", dest="no_color", action="store_true", default=default(False),
        help="Disable colorized output",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=default(False),
        help="Enable verbose output",
    )
    parser.add_argument(
        "--debug", action="store_true", default=default(False),
        help="Enable debug output",
    )
    parser.add_argument(
        "--config", default=default(""),
        help="Path to a crego recipe or configuration file",
    )


def _add_command(commands, name: str, short: str, long: str, example: str) -> argparse.ArgumentParser:
    parser = commands.add_parser(
        name,
        help=short,
        description=long,
        epilog=example,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_global_flags(parser, inherited=True)
    return parser


def _require_subcommand(
    parser: argparse.ArgumentParser, message: str
) -> Callable[[argparse.Namespace, TextIO], None]:
    def handler(_args: argparse.Namespace, out: TextIO) -> None:
        out.write(parser.format_help())
        raise CommandError(message)

    return handler


def _add_components_command(commands) -> None:
    components = _add_command(
        commands,
        "components",
        "Explore available project components",
        _COMPONENTS_LONG,
        _COMPONENTS_EXAMPLE,
    )
    components.set_defaults(
        handler=_require_subcommand(
            components, "components requires a subcommand: list or show"
        )
    )
    sub = components.add_subparsers(dest="components_command", metavar="<command>", title="commands")

    list_parser = _add_command(
        sub, "list", "List available components", _LIST_LONG, _LIST_EXAMPLE
    )
    list_parser.add_argument(
        "--category",
        default="",
        help="Filter by category: " + format_public_component_categories(),
    )
    list_parser.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print machine-readable JSON output",
    )
    list_parser.set_defaults(
        handler=lambda args, out: run_components_list(out, args.category, args.as_json)
    )

    show_parser = _add_command(
        sub, "show", "Show component details", _SHOW_LONG, _SHOW_EXAMPLE
    )
    show_parser.add_argument("component_id", metavar="component-id")
    show_parser.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print machine-readable JSON output",
    )
    show_parser.set_defaults(
        handler=lambda args, out: run_components_show(out, args.component_id, args.as_json)
    )


def build_parser(version_info: VersionInfo | None) -> argparse.ArgumentParser:
    """Build the crego argument parser."""
    info = _normalize(version_info)
    parser = _Parser(
        prog="crego",
        description=_ROOT_LONG,
        epilog=_ROOT_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--version", dest="show_version", action="store_true",
        help="Print the crego version",
    )
    _add_global_flags(parser, inherited=False)
    parser.set_defaults(handler=None)

    commands = parser.add_subparsers(dest="command", metavar="<command>", title="commands")
    _add_components_command(commands)
    version = _add_command(
        commands, "version", "Print crego build information", _VERSION_LONG, _VERSION_EXAMPLE
    )
    version.set_defaults(handler=lambda _args, out: out.write(version_line(info)))
    return parser


def run(
    argv: Sequence[str] | None = None,
    version_info: VersionInfo | None = None,
    out: TextIO | None = None,
    err_out: TextIO | None = None,
) -> int:
    """Run the command line and return the process exit code."""
    info = _normalize(version_info)
    out = out if out is not None else sys.stdout
    err_out = err_out if err_out is not None else sys.stderr
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser(info)
    try:
        try:
            args = parser.parse_args(arguments)
        except _HelpRequested as requested:
            out.write(requested.text)
            return 0
        if args.show_version:
            out.write(f"crego version {info.version}\n")
            return 0
        if args.handler is None:
            out.write(parser.format_help())
            return 0
        args.handler(args, out)
    except Exception as error:  # every failure becomes an exit code
        if should_print_error(error):
            err_out.write(f"{error}\n")
        return exit_code(error)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    return run(argv, VersionInfo())


if __name__ == "__main__":
    raise SystemExit(main())