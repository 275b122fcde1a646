"""Reading Erlang terms from rebar configuration text."""

from __future__ import annotations

from pathlib import Path
from typing import IO, AnyStr

from rebarconf.config import RebarConfig
from rebarconf.lexing import is_atom_char, is_atom_start, is_digit, process_escapes
from rebarconf.terms import Atom, Float, Integer, List, String, Term, Tuple

_WHITESPACE = frozenset(" \t\n\r")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class ParseError(ValueError):
    """A syntax error, with the line and column where it was found."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"syntax error at line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class Parser:
    """Reads a sequence of dot-terminated Erlang terms from a string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1

    @property
    def _at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def _current(self) -> str:
        return "" if self._at_end else self.text[self.position]

    def _advance(self) -> None:
        if self._at_end:
            return
        if self.text[self.position] == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1

    def _skip_whitespace(self) -> None:
        while not self._at_end and self._current in _WHITESPACE:
            self._advance()

    def _skip_to_end_of_line(self) -> None:
        while not self._at_end and self._current != "\n":
            self._advance()
        self._advance()

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self.line, self.column)

    def parse_terms(self) -> list[Term]:
        """Parse every top-level term, skipping whitespace and comments."""
        terms: list[Term] = []
        while not self._at_end:
            self._skip_whitespace()
            if self._at_end:
                break
            if self._current == "%":
                self._skip_to_end_of_line()
                continue
            terms.append(self.parse_term())
            self._skip_whitespace()
            if self._current != ".":
                raise self._error("expected '.' after term")
            self._advance()
        return terms

    def parse_term(self) -> Term:
        """Parse one term starting at the current position."""
        self._skip_whitespace()
        if self._at_end:
            raise self._error("unexpected end of input")
        ch = self._current
        if ch == "{":
            return Tuple(self._parse_sequence("}", "tuple"))
        if ch == "[":
            return List(self._parse_sequence("]", "list"))
        if ch == '"':
            return String(self._parse_quoted('"', "string"))
        if ch == "'":
            return Atom(self._parse_quoted("'", "atom"), is_quoted=True)
        if ch == "-" or is_digit(ch):
            return self._parse_number()
        if is_atom_start(ch):
            return self._parse_atom()
        raise self._error(f"unexpected character: {ch}")

    def _parse_sequence(self, closing: str, kind: str) -> list[Term]:
        self._advance()
        elements: list[Term] = []
        self._skip_whitespace()
        if self._current == closing:
            self._advance()
            return elements
        while True:
            elements.append(self.parse_term())
            self._skip_whitespace()
            if self._current == closing:
                self._advance()
                return elements
            if self._current != ",":
                raise self._error(f"expected ',' or '{closing}' in {kind}")
            self._advance()
            self._skip_whitespace()

    def _parse_quoted(self, quote: str, kind: str) -> str:
        self._advance()
        start = self.position
        while not self._at_end and self._current != quote:
            if self._current == "\\":
                self._advance()
                if self._at_end:
                    raise self._error(f"unterminated {kind} literal")
            self._advance()
        if self._at_end:
            raise self._error(f"unterminated {kind} literal")
        value = process_escapes(self.text[start:self.position])
        self._advance()
        return value

    def _parse_atom(self) -> Atom:
        start = self.position
        self._advance()
        while is_atom_char(self._current):
            self._advance()
        return Atom(self.text[start:self.position])

    def _skip_digits(self) -> bool:
        found = False
        while is_digit(self._current):
            found = True
            self._advance()
        return found

    def _parse_number(self) -> Term:
        start = self.position
        if self._current == "-":
            self._advance()

        has_digits = self._skip_digits()
        is_float = False

        if self._current == ".":
            is_float = True
            self._advance()
            if not self._skip_digits():
                raise self._error("expected digits after decimal point")

        if self._current in ("e", "E"):
            is_float = True
            self._advance()
            if self._current in ("+", "-"):
                self._advance()
            if not self._skip_digits():
                raise self._error("expected digits in exponent")

        if not has_digits:
            raise self._error("expected digits in number")

        text = self.text[start:self.position]
        if is_float:
            value = float(text)
            if value in (float("inf"), float("-inf")):
                raise self._error(f"invalid float: {text}")
            return Float(value)
        number = int(text)
        if not _INT_MIN <= number <= _INT_MAX:
            raise self._error(f"invalid integer: {text}")
        return Integer(number)


def parse(text: str) -> RebarConfig:
    """Parse configuration text into a RebarConfig."""
    return RebarConfig(raw=text, terms=Parser(text).parse_terms())


def parse_file(path: str | Path) -> RebarConfig:
    """Read and parse the configuration file at *path*."""
    return parse(Path(path).read_text(encoding="utf-8"))


def parse_reader(stream: IO[AnyStr]) -> RebarConfig:
    """Read a text or binary stream to its end and parse its contents."""
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return parse(content)