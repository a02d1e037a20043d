"""Tests for Rich Console factory and theme."""

from io import StringIO

from domaddr.output.console import DOMADDR_THEME, create_console, get_output, style_for_tld_type


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_width(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_styles_for_every_tld_type(self) -> None:
        for value in ("generic", "sponsored", "country-code", "infrastructure", "generic-restricted", "test"):
            assert style_for_tld_type(value) in DOMADDR_THEME.styles

    def test_no_type(self) -> None:
        assert style_for_tld_type(None) == ""
