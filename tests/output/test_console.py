"""Tests for the Rich console factory."""

from dicectl.output.console import create_console, get_output, style_for_outcome


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in ("dice.ok", "dice.error", "dice.total", "dice.max", "dice.min"):
            console.get_style(name)


class TestStyleForOutcome:
    def test_max(self) -> None:
        assert style_for_outcome(6, 6) == "dice.max"

    def test_one(self) -> None:
        assert style_for_outcome(1, 20) == "dice.min"

    def test_plain(self) -> None:
        assert style_for_outcome(4, 6) == ""
