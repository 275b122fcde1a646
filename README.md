# rebarconf

A small library for reading Erlang `rebar.config` files. It parses the
Erlang terms in a file into Python objects and gives shortcuts for the
common top-level sections. It can also print a configuration back out with
consistent indentation.

## Installation

```
pip install rebarconf
```

It needs only the standard library and supports Python 3.10 and later.

## Parsing

```python
from rebarconf.parser import parse, parse_file, parse_reader

config = parse('{erl_opts, [debug_info]}. {deps, [{cowboy, "2.9.0"}]}.')
print(len(config.terms))          # 2

config = parse_file("rebar.config")

with open("rebar.config", encoding="utf-8") as stream:
    config = parse_reader(stream)
```

`parse_reader` reads the stream to its end. It accepts text streams and
binary streams, and decodes binary content as UTF-8. `parse_file` reads the
file as UTF-8. If the file cannot be read, it raises the usual `OSError`,
for example `FileNotFoundError`.

Each top-level term must end with a `.`, and a `%` starts a comment that
runs to the end of the line. Malformed input raises
`rebarconf.parser.ParseError`, which is a subclass of `ValueError`. It has
`line`, `column` and `message` attributes, and its text gives the position:

```python
parse("{erl_opts, [debug_info]}")
# ParseError: syntax error at line 1, column 25: expected '.' after term
```

The reader handles the following:

- unquoted atoms, which start with a lowercase letter or `_`
- quoted atoms (`'...'`)
- double-quoted strings, with the escapes `\"`, `\\`, `\n`, `\r` and `\t`
- integers in the 64-bit signed range
- floats, including exponents
- tuples and lists

It rejects a trailing comma and a number with a missing fraction or exponent.

## Terms

The parsed values are instances of these classes in `rebarconf.terms`:

- `Atom`
- `String`
- `Integer`
- `Float`
- `Tuple`
- `List`

All of them are frozen dataclasses derived from `Term`. `str()` on a term
gives its Erlang text. `Tuple` and `List` hold their `elements` as a tuple,
and they support `len()`, iteration and indexing.

`compare()` checks structural equality. It ignores whether an atom was
quoted, and an integer never equals a float.

```python
from rebarconf.terms import Atom, Integer, Float, List

Atom("test").compare(Atom("test", is_quoted=True))   # True
Integer(1).compare(Float(1.0))                      # False
str(Atom("quoted atom", is_quoted=True))            # "'quoted atom'"
str(List([Integer(1), Atom("a")]))                  # "[1, a]"
```

## Looking up sections

`rebarconf.config.RebarConfig` holds the `raw` text and the list of
top-level `terms`. Its lookup methods find top-level `{name, ...}` tuples by
the name of their leading atom. Each one returns `None` when nothing is
found.

```python
config.get_term("minimum_otp_vsn")     # the whole tuple
config.get_tuple_elements("deps")      # the elements after the name
config.get_deps()
config.get_erl_opts()
config.get_plugins()
config.get_relx_config()
config.get_profiles_config()
config.get_app_name()                  # "my_app" for {app_name, my_app} or {app_name, "my_app"}
```

`get_tuple_elements` also returns `None` for a tuple that holds only its
name.

## Pretty-printing

```python
print(config.format(2))
```

The output separates top-level terms with blank lines and ends each one
with `.`. Short lists and tuples of simple terms stay on one line. Larger
ones are split across lines, indented by the given number of spaces per
level. An empty configuration formats as an empty string. The output parses
back to the same terms.

The module `rebarconf.formatter` provides the underlying functions:

- `format_term(term, level, spaces)`
- `is_simple_term(term)`
- `all_simple_terms(terms)`

## Analysis

`rebarconf.analyzer.RebarConfigAnalyzer` builds summaries of a parsed
configuration:

```python
from rebarconf.analyzer import RebarConfigAnalyzer, term_type_name

analyzer = RebarConfigAnalyzer(config)
for dep in analyzer.dependencies_info():
    print(dep.name, dep.type, dep.version, dep.source, dep.ref_type, dep.ref_value)

analyzer.profiles_info()            # {"dev": {"deps": <term>, ...}, ...}
analyzer.has_warnings_as_errors()
analyzer.count_by_term_type()       # {"Atom": 42, "Tuple": 32, ...}
analyzer.format_config(4)
term_type_name(config.terms[0])     # "Tuple"
```

`dependencies_info()` handles two forms of dependency:

- A `{name, "version"}` dependency gets type `version`.
- A `{name, {git, Url, {RefType, "ref"}}}` dependency gets type `git`, with
  its source URL and ref filled in.

For other source tuples, only the leading atom is recorded as the type.

## What it does not do

rebarconf is a library only. It has no command-line tool. It does not write
or change configuration files, apart from returning formatted text. It does
not interpret what rebar does with a setting, and it does not fetch or
resolve dependencies.

## Running the tests

```
pip install -e ".[test]"
pytest
```