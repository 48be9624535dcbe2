"""Symbols and colours used to draw the board."""

from __future__ import annotations

from dataclasses import dataclass

UNOPENED = "∙"
ZERO = "■"
BOMB = "δ"
FLAG = "F"

_SYMBOL_COLOURS = {
    ZERO: ("\x1b[38;5;248m", "\x1b[1;0m"),
    FLAG: ("\x1b[102m\x1b[36m", "\x1b[0m"),
    BOMB: ("\x1b[101m\x1b[31m", "\x1b[0m"),
    UNOPENED: ("\x1b[38;5;242m", "\x1b[1;0m"),
}


@dataclass
class Theme:
    """Renders symbols, with ANSI colours when ``using_escape_codes`` is set."""

    using_escape_codes: bool = False

    def colorise_symbol(self, symbol: str, escape_code: str, rest: str) -> str:
        """Wrap ``symbol`` between ``escape_code`` and ``rest`` if colours are on."""
        if self.using_escape_codes:
            return f"{escape_code}{symbol}{rest}"
        return symbol

    def default_symbol(self, symbol: str) -> str:
        """Return a known symbol in its default colour; others unchanged."""
        colours = _SYMBOL_COLOURS.get(symbol)
        if colours is None:
            return symbol
        return self.colorise_symbol(symbol, *colours)

    def colorise_number(self, n: int) -> str:
        """Render a cell count; zero is shown as the zero symbol."""
        if n == 0:
            return self.default_symbol(ZERO)
        if self.using_escape_codes:
            return f"\x1b[1;3{n}m{n}\x1b[0m"
        return str(n)