"""Tests for the ConsoleBuilder output accumulator."""

import io

import pytest

from simple_terminal.ansi.color import Color
from simple_terminal.ansi.style import Style
from simple_terminal.box.styles import BoxStyle
from simple_terminal.core.builder import NEWLINE, ConsoleBuilder
from simple_terminal.core.config import ConsoleConfig
from simple_terminal.errors import FormatError, InvalidArgumentError, MessageLookupError


class TestAppending:
    """Tests for the chained append operations."""

    def test_chaining_returns_same_builder(self, builder: ConsoleBuilder) -> None:
        result = builder.color(Color.RED).text("x").reset()
        assert result is builder

    def test_color(self, builder: ConsoleBuilder) -> None:
        builder.color(Color.RED).text("X")
        assert builder.build() == "\x1b[31mX"

    def test_background(self, builder: ConsoleBuilder) -> None:
        builder.background(Color.BLUE).text("X")
        assert builder.build() == "\x1b[44mX"

    def test_style(self, builder: ConsoleBuilder) -> None:
        builder.style(Style.BOLD).text("X")
        assert builder.build() == "\x1b[1mX"

    def test_reset(self, builder: ConsoleBuilder) -> None:
        builder.color(Color.RED).reset().text("X")
        assert builder.build() == "\x1b[31m\x1b[0mX"

    @pytest.mark.parametrize("text", ["", "Hello", "a b c", "ünïcödé ✓", "tab\there"])
    def test_text_round_trip(self, builder: ConsoleBuilder, text: str) -> None:
        assert builder.text(text).build() == text

    def test_space(self, builder: ConsoleBuilder) -> None:
        assert builder.text("A").space().text("B").build() == "A B"

    def test_newline(self, builder: ConsoleBuilder) -> None:
        assert builder.text("A").newline().text("B").build() == "A\nB"

    def test_line(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_level(1).line("Test")
        assert builder.build() == "  Test" + NEWLINE

    def test_formatted_line(self, builder: ConsoleBuilder) -> None:
        builder.formatted_line("Hello {}", "World")
        assert builder.build() == "Hello World\n"

    def test_formatted_line_keywords(self, builder: ConsoleBuilder) -> None:
        builder.formatted_line("{name}: {count:>3}", name="items", count=7)
        assert builder.build() == "items:   7\n"

    @pytest.mark.parametrize(
        "fmt, args, kwargs",
        [
            ("{} and {}", ("one",), {}),
            ("{missing}", (), {}),
            ("{:d}", ("text",), {}),
            ("{:d}", (None,), {}),
            ("{:d}", ([1],), {}),
            ("{0.missing}", (1,), {}),
        ],
    )
    def test_formatted_line_mismatch(self, builder: ConsoleBuilder, fmt, args, kwargs) -> None:
        with pytest.raises(FormatError):
            builder.formatted_line(fmt, *args, **kwargs)
        assert builder.build() == ""


class TestIndentation:
    """Tests for indent level and unit."""

    def test_indent_unit(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_unit(">>").set_indent_level(1).line("test")
        assert builder.build().startswith(">>test")

    def test_default_unit(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_level(2).line("X")
        assert builder.build() == "    X\n"

    def test_empty_unit_rejected(self, builder: ConsoleBuilder) -> None:
        with pytest.raises(InvalidArgumentError):
            builder.set_indent_unit("")

    def test_negative_level_clamps(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_level(-3)
        assert builder.indent_level == 0

    def test_relative_indent(self, builder: ConsoleBuilder) -> None:
        builder.indent().indent(2).dedent()
        assert builder.indent_level == 2
        builder.dedent(10)
        assert builder.indent_level == 0

    def test_text_is_not_indented(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_level(3).text("raw")
        assert builder.build() == "raw"


class TestRule:
    """Tests for horizontal rules."""

    def test_configured_width(self, builder: ConsoleBuilder) -> None:
        builder.set_rule_width(5).rule("#")
        assert builder.build() == "#####\n"

    def test_default_width(self, builder: ConsoleBuilder) -> None:
        builder.rule("*")
        assert builder.build() == "*" * 80 + "\n"

    def test_explicit_width(self, builder: ConsoleBuilder) -> None:
        builder.rule("#", 5)
        assert builder.build() == "#####\n"

    @pytest.mark.parametrize("width", [0, -1, -80])
    def test_non_positive_width_draws_one(self, builder: ConsoleBuilder, width: int) -> None:
        builder.rule("=", width)
        assert builder.build() == "=\n"

    def test_indented(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_level(1).rule("-", 3)
        assert builder.build() == "  ---\n"

    @pytest.mark.parametrize("width", [0, -5])
    def test_invalid_rule_width(self, builder: ConsoleBuilder, width: int) -> None:
        with pytest.raises(InvalidArgumentError):
            builder.set_rule_width(width)
        assert builder.rule_width == 80

    @pytest.mark.parametrize("char", ["", "ab"])
    def test_rule_char_must_be_single(self, builder: ConsoleBuilder, char: str) -> None:
        with pytest.raises(InvalidArgumentError):
            builder.rule(char)


class TestBox:
    """Tests for boxes appended through the builder."""

    def test_untitled_ascii(self, builder: ConsoleBuilder) -> None:
        builder.box(None, "Line1\nLine2", BoxStyle.ASCII)
        assert builder.build() == (
            "+-------+\n"
            "| Line1 |\n"
            "| Line2 |\n"
            "+-------+\n"
        )

    def test_titled_ascii(self, builder: ConsoleBuilder) -> None:
        builder.box("T", "C", BoxStyle.ASCII)
        rows = builder.build().splitlines()
        assert rows == ["+---+", "| T |", "+---+", "| C |", "+---+"]

    def test_default_style_from_config(self, builder: ConsoleBuilder) -> None:
        builder.box("T", "C")
        assert builder.build().startswith("┌")

    def test_set_box_style(self, builder: ConsoleBuilder) -> None:
        builder.set_box_style(BoxStyle.DOUBLE).box("T", "C")
        assert "╔" in builder.build()

    def test_set_box_style_by_name(self, builder: ConsoleBuilder) -> None:
        builder.set_box_style("Heavy").box(None, "C")
        assert builder.build().startswith("┏")

    def test_every_row_indented(self, builder: ConsoleBuilder) -> None:
        builder.set_indent_unit("..").set_indent_level(2).box("Title", "a\nb", BoxStyle.ASCII)
        rows = builder.build().splitlines()
        assert len(rows) == 6
        assert all(row.startswith("....") for row in rows)
        assert len({len(row) for row in rows}) == 1

    def test_none_content(self, builder: ConsoleBuilder) -> None:
        with pytest.raises(InvalidArgumentError):
            builder.box("T", None)  # type: ignore[arg-type]


class TestWhen:
    """Tests for conditional composition."""

    def test_true_runs(self, builder: ConsoleBuilder) -> None:
        result = builder.when(True, lambda b: b.text("X"))
        assert result is builder
        assert builder.build() == "X"

    def test_false_skips(self, builder: ConsoleBuilder) -> None:
        result = builder.when(False, lambda b: b.text("Y"))
        assert result is builder
        assert builder.build() == ""

    def test_inside_chain(self, builder: ConsoleBuilder) -> None:
        out = builder.text("a").when(True, lambda b: b.text("b")).text("c").build()
        assert out == "abc"


class TestOutput:
    """Tests for build, clear and flushing to the sink."""

    def test_build_keeps_buffer(self, builder: ConsoleBuilder) -> None:
        builder.text("ABC")
        assert builder.build() == "ABC"
        assert builder.build() == "ABC"
        assert str(builder) == "ABC"

    def test_clear(self, builder: ConsoleBuilder) -> None:
        assert builder.text("ABC").clear().build() == ""
        assert builder.clear().build() == ""

    def test_flush(self, builder: ConsoleBuilder, sink: io.StringIO) -> None:
        builder.text("Hello")
        builder.flush()
        assert sink.getvalue() == "Hello"
        assert builder.build() == ""

    def test_flush_line(self, builder: ConsoleBuilder, sink: io.StringIO) -> None:
        builder.text("Hello")
        builder.flush_line()
        assert sink.getvalue() == "Hello\n"
        assert builder.build() == ""

    def test_flush_twice_writes_once(self, builder: ConsoleBuilder, sink: io.StringIO) -> None:
        builder.text("A").flush()
        builder.flush()
        assert sink.getvalue() == "A"

    def test_default_sink_is_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleBuilder().text("to stdout").flush_line()
        assert capsys.readouterr().out == "to stdout\n"

    def test_write_error_propagates(self) -> None:
        class BrokenSink:
            def write(self, s: str) -> int:
                raise OSError("disk full")

        builder = ConsoleBuilder(sink=BrokenSink()).text("data")
        with pytest.raises(OSError):
            builder.flush()
        assert builder.build() == "data"


class TestConfiguration:
    """Tests for defaults captured from ConsoleConfig."""

    def test_defaults(self, builder: ConsoleBuilder) -> None:
        assert builder.rule_width == 80
        assert builder.indent_unit == "  "
        assert builder.indent_level == 0
        assert builder.box_style == BoxStyle.UNICODE
        assert builder.locale == "en"

    def test_config_values_used(self, make_builder) -> None:
        cb = make_builder(rule_width=3, indent_unit="\t", box_style="ascii")
        cb.set_indent_level(1).rule("~").box(None, "x")
        assert cb.build() == "\t~~~\n\t+---+\n\t| x |\n\t+---+\n"

    def test_instance_overrides_do_not_leak(self) -> None:
        config = ConsoleConfig(rule_width=10)
        first = ConsoleBuilder(config).set_rule_width(3)
        second = ConsoleBuilder(config)
        assert first.rule_width == 3
        assert second.rule_width == 10


class TestMessages:
    """Tests for localized message lookup."""

    def test_msg(self, builder: ConsoleBuilder) -> None:
        assert builder.msg("error.invalidInt")

    def test_all_prompt_keys_present(self, builder: ConsoleBuilder) -> None:
        for key in ("error.invalidInt", "error.yesno", "error.invalidChoice", "prompt.choice"):
            assert builder.msg(key)

    def test_missing_key(self, builder: ConsoleBuilder) -> None:
        with pytest.raises(MessageLookupError):
            builder.msg("no.such.key")

    def test_set_locale(self, builder: ConsoleBuilder) -> None:
        english = builder.msg("prompt.choice")
        builder.set_locale("de")
        assert builder.locale == "de"
        assert builder.msg("prompt.choice") != english

    def test_locale_from_config(self, make_builder) -> None:
        assert make_builder(locale="de-DE").msg("prompt.choice") == "Ihre Wahl:"
