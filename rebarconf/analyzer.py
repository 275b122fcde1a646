"""Summaries of a parsed rebar configuration: dependencies, profiles, term counts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from rebarconf.config import RebarConfig
from rebarconf.terms import Atom, Float, Integer, List, String, Term, Tuple

_TYPE_NAMES: tuple[tuple[type, str], ...] = (
    (Atom, "Atom"),
    (String, "String"),
    (Integer, "Integer"),
    (Float, "Float"),
    (Tuple, "Tuple"),
    (List, "List"),
)


def term_type_name(term: object) -> str:
    """Return the name of the kind of *term*, or ``"Unknown"``."""
    for cls, name in _TYPE_NAMES:
        if isinstance(term, cls):
            return name
    return "Unknown"


@dataclass
class DependencyInfo:
    """What is known about one entry of the ``deps`` list."""

    name: str
    type: str = ""
    version: str = ""
    source: str = ""
    ref_type: str = ""
    ref_value: str = ""


def _first_list(elements: tuple[Term, ...] | None) -> List | None:
    if elements and isinstance(elements[0], List):
        return elements[0]
    return None


def _keyed_pair(term: Term) -> tuple[str, Term] | None:
    """Split ``{key, value, ...}`` into its atom key and first value."""
    if isinstance(term, Tuple) and len(term) >= 2 and isinstance(term[0], Atom):
        return term[0].value, term[1]
    return None


def _fill_source(info: DependencyInfo, spec: Tuple) -> None:
    if not spec.elements or not isinstance(spec[0], Atom):
        return
    info.type = spec[0].value
    if info.type != "git" or len(spec) < 2:
        return
    if isinstance(spec[1], String):
        info.source = spec[1].value
    if len(spec) > 2:
        ref = _keyed_pair(spec[2])
        if ref is not None:
            info.ref_type, ref_value = ref
            if isinstance(ref_value, String):
                info.ref_value = ref_value.value


class RebarConfigAnalyzer:
    """Answers common questions about a parsed rebar configuration."""

    def __init__(self, config: RebarConfig) -> None:
        self.config = config

    def dependencies_info(self) -> list[DependencyInfo]:
        """Describe every dependency named in the ``deps`` list."""
        deps = _first_list(self.config.get_deps())
        if deps is None:
            return []
        result: list[DependencyInfo] = []
        for dep in deps:
            pair = _keyed_pair(dep)
            if pair is None:
                continue
            name, spec = pair
            info = DependencyInfo(name=name)
            if isinstance(spec, String):
                info.type = "version"
                info.version = spec.value
            elif isinstance(spec, Tuple):
                _fill_source(info, spec)
            result.append(info)
        return result

    def profiles_info(self) -> dict[str, dict[str, Term]]:
        """Map each profile name to its settings, keyed by setting name."""
        profiles = _first_list(self.config.get_profiles_config())
        if profiles is None:
            return {}
        result: dict[str, dict[str, Term]] = {}
        for profile in profiles:
            pair = _keyed_pair(profile)
            if pair is None:
                continue
            name, body = pair
            settings: dict[str, Term] = {}
            if isinstance(body, List):
                for item in body:
                    setting = _keyed_pair(item)
                    if setting is not None:
                        key, value = setting
                        settings[key] = value
            result[name] = settings
        return result

    def has_warnings_as_errors(self) -> bool:
        """True when ``erl_opts`` contains the atom ``warnings_as_errors``."""
        opts = _first_list(self.config.get_erl_opts())
        if opts is None:
            return False
        return any(
            isinstance(opt, Atom) and opt.value == "warnings_as_errors" for opt in opts
        )

    def format_config(self, indent: int) -> str:
        """Return the whole configuration pretty-printed with *indent* spaces."""
        return self.config.format(indent)

    def count_by_term_type(self) -> dict[str, int]:
        """Count every term in the configuration, nested ones included, by kind."""
        counts: Counter[str] = Counter()
        pending: list[Term] = list(reversed(self.config.terms))
        while pending:
            term = pending.pop()
            counts[term_type_name(term)] += 1
            if isinstance(term, (Tuple, List)):
                pending.extend(reversed(term.elements))
        return dict(counts)