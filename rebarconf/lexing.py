"""Character classes and escape handling used by the term reader."""

_ESCAPE_REPLACEMENTS = (
    ('\\"', '"'),
    ("\\\\", "\\"),
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
)


def process_escapes(s: str) -> str:
    """Replace the escape sequences \\" \\\\ \\n \\r \\t with their characters."""
    for escaped, plain in _ESCAPE_REPLACEMENTS:
        s = s.replace(escaped, plain)
    return s


def is_digit(ch: str) -> bool:
    """True for a single ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_atom_start(ch: str) -> bool:
    """True for a character that may begin an unquoted atom."""
    return len(ch) == 1 and ("a" <= ch <= "z" or ch == "_")


def is_atom_char(ch: str) -> bool:
    """True for a character that may continue an unquoted atom."""
    return len(ch) == 1 and (
        "a" <= ch <= "z" or "A" <= ch <= "Z" or "0" <= ch <= "9" or ch in "_@"
    )