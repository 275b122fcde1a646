"""The parsed contents of a rebar configuration file and lookups into it."""

from __future__ import annotations

from dataclasses import dataclass, field

from rebarconf.formatter import format_term
from rebarconf.terms import Atom, String, Term, Tuple


@dataclass
class RebarConfig:
    """A parsed rebar configuration: its raw text and its top-level terms."""

    raw: str = ""
    terms: list[Term] = field(default_factory=list)

    def get_term(self, name: str) -> Term | None:
        """Return the first top-level tuple whose leading atom is *name*."""
        for term in self.terms:
            if isinstance(term, Tuple) and term.elements:
                head = term.elements[0]
                if isinstance(head, Atom) and head.value == name:
                    return term
        return None

    def get_tuple_elements(self, name: str) -> tuple[Term, ...] | None:
        """Return the elements after the name of the tuple called *name*.

        Returns None when there is no such tuple or it holds only the name.
        """
        term = self.get_term(name)
        if isinstance(term, Tuple) and len(term.elements) > 1:
            return term.elements[1:]
        return None

    def get_deps(self) -> tuple[Term, ...] | None:
        """Return the value of the ``deps`` entry."""
        return self.get_tuple_elements("deps")

    def get_erl_opts(self) -> tuple[Term, ...] | None:
        """Return the value of the ``erl_opts`` entry."""
        return self.get_tuple_elements("erl_opts")

    def get_app_name(self) -> str | None:
        """Return the application name, given either as a string or an atom."""
        elements = self.get_tuple_elements("app_name")
        if not elements:
            return None
        first = elements[0]
        if isinstance(first, (String, Atom)):
            return first.value
        return None

    def get_plugins(self) -> tuple[Term, ...] | None:
        """Return the value of the ``plugins`` entry."""
        return self.get_tuple_elements("plugins")

    def get_relx_config(self) -> tuple[Term, ...] | None:
        """Return the value of the ``relx`` entry."""
        return self.get_tuple_elements("relx")

    def get_profiles_config(self) -> tuple[Term, ...] | None:
        """Return the value of the ``profiles`` entry."""
        return self.get_tuple_elements("profiles")

    def format(self, indent: int) -> str:
        """Render every term, each ended by a dot, separated by blank lines."""
        if not self.terms:
            return ""
        body = "\n\n".join(format_term(term, 0, indent) + "." for term in self.terms)
        return body + "\n"