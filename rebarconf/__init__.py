"""Parse, query, pretty-print and summarise Erlang rebar.config files."""

__version__ = "0.1.0"