import io
import json

import pytest

from crego.cli import (
    CommandError,
    VersionInfo,
    build_parser,
    exit_code,
    main,
    run,
    should_print_error,
    version_line,
)


def execute(*args, version_info=None):
    out = io.StringIO()
    err_out = io.StringIO()
    code = run(list(args), version_info or VersionInfo(), out, err_out)
    return code, out.getvalue(), err_out.getvalue()


@pytest.mark.parametrize("name", ["components", "version"])
def test_root_contains_commands(name):
    code, out, _ = execute(name, "--help")
    assert code == 0
    assert f"crego {name}" in out


def test_root_accepts_global_flags():
    code, out, _ = execute(
        "--no-color", "--verbose", "--debug", "--config", "crego.yaml", "version"
    )
    assert code == 0
    assert out.startswith("version: dev\n")


def test_global_flags_after_subcommand():
    args = build_parser(VersionInfo()).parse_args(["version", "--no-color"])
    assert args.no_color is True
    assert args.verbose is False


def test_version_command_prints_build_metadata():
    code, out, _ = execute(
        "version",
        version_info=VersionInfo("1.2.3", "abc123", "2026-04-30T12:00:00Z"),
    )
    assert code == 0
    assert "version: 1.2.3" in out
    assert "commit: abc123" in out
    assert "built: 2026-04-30T12:00:00Z" in out


def test_version_line_normalizes_empty_values():
    assert version_line(VersionInfo("", "", "")) == (
        "version: dev\ncommit: unknown\nbuilt: unknown\n"
    )


def test_version_flag():
    code, out, _ = execute("--version", version_info=VersionInfo("1.2.3", "c", "b"))
    assert code == 0
    assert out == "crego version 1.2.3\n"


def test_components_requires_subcommand():
    code, out, err = execute("components")
    assert code == 1
    assert err == "components requires a subcommand: list or show\n"
    assert "Explore available project components" in out
    assert "list" in out
    assert "show" in out


@pytest.mark.parametrize(
    "args",
    [["components"], ["components", "list"], ["components", "show"]],
)
def test_help_examples(args):
    code, out, _ = execute(*args, "--help")
    assert code == 0
    assert "crego " + " ".join(args) in out


def test_components_list_through_cli():
    code, out, _ = execute("components", "list", "--category", "server")
    assert code == 0
    assert "  gin - HTTP server built with Gin." in out


def test_components_show_json_through_cli():
    code, out, _ = execute("components", "show", "server.gin", "--json")
    assert code == 0
    assert json.loads(out)["category"] == "server"


def test_unknown_category_exit_code():
    code, _, err = execute("components", "list", "--category", "routing")
    assert code == 1
    assert 'unknown component category "routing"' in err


def test_unknown_component_exit_code():
    code, _, err = execute("components", "show", "server.martini")
    assert code == 1
    assert "unknown component server.martini" in err


def test_show_requires_argument():
    code, _, err = execute("components", "show")
    assert code == 1
    assert "component-id" in err


def test_unknown_command_fails():
    code, _, err = execute("bogus")
    assert code == 1
    assert "bogus" in err


def test_exit_code_values():
    assert exit_code(None) == 0
    assert exit_code(ValueError("boom")) == 1
    assert exit_code(CommandError("bad", exit_code=3)) == 3


def test_exit_code_follows_cause():
    try:
        try:
            raise CommandError("inner", exit_code=3, handled=True)
        except CommandError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as outer:
        assert exit_code(outer) == 3
        assert should_print_error(outer) is False


def test_should_print_error():
    assert should_print_error(None) is False
    assert should_print_error(ValueError("x")) is True
    assert should_print_error(CommandError("x", handled=True)) is False
    assert should_print_error(CommandError("x")) is True


def test_handled_error_is_not_printed():
    out = io.StringIO()
    err_out = io.StringIO()
    code = run(["components"], VersionInfo(), out, err_out)
    assert code == 1
    assert err_out.getvalue().strip() == "components requires a subcommand: list or show"


def test_main_runs_version(capsys):
    assert main(["version"]) == 0
    assert "commit: unknown" in capsys.readouterr().out


def test_root_without_command_prints_help():
    code, out, _ = execute()
    assert code == 0
    assert "crego is a TUI-first Go project generator." in out