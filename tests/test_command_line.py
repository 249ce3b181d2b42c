import io
from types import SimpleNamespace

import pytest

from utilbox.command_line import (
    Arg,
    Parser,
    make_increment,
    make_toggle,
    make_value,
)


def _opts():
    return SimpleNamespace(verbose=False, level=0, number=0, name="")


def _parser(opts):
    return Parser(
        "demo",
        [
            Arg("-v", "--verbose", "", "Verbose output", make_toggle(opts, "verbose")),
            Arg("-l", "--level", "", "Raise level", make_increment(opts, "level")),
            Arg("-n", "--number", "<n>", "A number", make_value(opts, "number", int)),
        ],
    )


def test_toggle_flips_flag():
    opts = _opts()
    parser = _parser(opts)
    parser.process(["-v"])
    assert opts.verbose is True
    parser.process(["--verbose"])
    assert opts.verbose is False


def test_increment_counts_each_occurrence():
    opts = _opts()
    args = ["-l", "--level", "-l"]
    _parser(opts).process(args)
    assert opts.level == len(args)


def test_value_attached_to_option():
    opts = _opts()
    _parser(opts).process(["-n42"])
    assert opts.number == 42


def test_value_in_next_argument():
    opts = _opts()
    parser = _parser(opts)
    parser.process(["--number", "7", "rest"])
    assert opts.number == 7
    assert parser.remaining_args() == ["rest"]


def test_missing_argument_raises():
    parser = _parser(_opts())
    with pytest.raises(ValueError, match="missing argument after -n"):
        parser.process(["-n"])


def test_unmatched_arguments_remain_in_order():
    opts = _opts()
    parser = _parser(opts)
    parser.process(["a", "-v", "b"])
    assert parser.remaining_args() == ["a", "b"]
    assert opts.verbose is True


def test_name():
    assert Parser("demo").name() == "demo"


def test_help_option_prints_and_exits(capsys):
    parser = _parser(_opts())
    with pytest.raises(SystemExit) as exc:
        parser.process(["--help"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("demo\navailable options:\n")


def test_show_help_aligns_explanations():
    parser = _parser(_opts())
    out = io.StringIO()
    parser.show_help(out)
    lines = out.getvalue().splitlines()
    assert lines[:2] == ["demo", "available options:"]
    option_lines = lines[2:]
    assert len(option_lines) == 4
    columns = {line.index(" : ") for line in option_lines}
    assert len(columns) == 1
    assert any(line.startswith("  -h|--help ") for line in option_lines)
    assert option_lines[-1].endswith(" : This help")


def test_add_single_and_list():
    opts = {"name": "", "flag": False}
    parser = Parser("demo")
    parser.add(Arg("-s", "--name", "<s>", "Name", make_value(opts, "name", str)))
    parser.add([Arg("-f", "--flag", "", "Flag", make_toggle(opts, "flag"))])
    parser.process(["--name", "abc", "-f"])
    assert opts == {"name": "abc", "flag": True}


def test_make_value_uses_current_type():
    opts = _opts()
    store = make_value(opts, "number")
    store("15")
    assert opts.number == 15