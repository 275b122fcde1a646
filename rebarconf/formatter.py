"""Pretty-printing of Erlang terms with configurable indentation."""

from __future__ import annotations

from typing import Iterable

from rebarconf.terms import Atom, Float, Integer, List, String, Term, Tuple

_CONTROL_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote_char(ch: str) -> str:
    if ch in '"\\':
        return "\\" + ch
    if ch.isprintable():
        return ch
    if ch in _CONTROL_ESCAPES:
        return _CONTROL_ESCAPES[ch]
    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _quote(text: str) -> str:
    return '"' + "".join(map(_quote_char, text)) + '"'


def _indent(count: int) -> str:
    if count < 0:
        raise ValueError(f"negative indentation: {count}")
    return " " * count


def _block(opening: str, closing: str, elements: tuple[Term, ...], level: int, spaces: int) -> str:
    inner = _indent((level + 1) * spaces)
    body = ",\n".join(inner + format_term(e, level + 1, spaces) for e in elements)
    return f"{opening}\n{body}\n{_indent(level * spaces)}{closing}"


def _one_line(opening: str, closing: str, elements: Iterable[Term], spaces: int) -> str:
    return opening + ", ".join(format_term(e, 0, spaces) for e in elements) + closing


def _format_tuple(elements: tuple[Term, ...], level: int, spaces: int) -> str:
    if not elements:
        return "{}"
    head = elements[0]
    if len(elements) >= 2 and isinstance(head, Atom):
        if is_simple_term(elements[1]):
            return _one_line("{", "}", elements, spaces)
        rest = ", ".join(format_term(e, level + 1, spaces) for e in elements[1:])
        return "{" + str(head) + ", " + rest + "}"
    return _block("{", "}", elements, level, spaces)


def _format_list(elements: tuple[Term, ...], level: int, spaces: int) -> str:
    if not elements:
        return "[]"
    if len(elements) <= 3 and all_simple_terms(elements):
        return _one_line("[", "]", elements, spaces)
    return _block("[", "]", elements, level, spaces)


def format_term(term: Term, level: int, spaces: int) -> str:
    """Format *term* at nesting *level*, indenting each level by *spaces*."""
    match term:
        case Atom() | Integer() | Float():
            return str(term)
        case String(value=value):
            return _quote(value)
        case Tuple(elements=elements):
            return _format_tuple(elements, level, spaces)
        case List(elements=elements):
            return _format_list(elements, level, spaces)
    return "UNKNOWN_TERM"


def is_simple_term(term: object) -> bool:
    """True when *term* is small enough to be printed on one line."""
    match term:
        case Atom() | String() | Integer() | Float():
            return True
        case List(elements=elements):
            return len(elements) <= 3 and all_simple_terms(elements)
        case Tuple(elements=elements):
            return len(elements) <= 2 and all_simple_terms(elements)
    return False


def all_simple_terms(terms: Iterable[object]) -> bool:
    """True when every term in *terms* is simple."""
    return all(is_simple_term(t) for t in terms)