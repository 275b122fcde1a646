import pytest

from rebarconf.config import RebarConfig
from rebarconf.parser import parse
from rebarconf.terms import Atom, List, String, Tuple

ACCESSOR_INPUT = """
{app_name, "my_app_string"}.
{minimum_otp_vsn, "22.0"}.
{plugins, [rebar3_hex, rebar3_auto]}.
{profiles, [
    {dev, [
        {deps, [{meck, "0.9.0"}]},
        {erl_opts, [debug_info]}
    ]},
    {test, [
        {deps, [{proper, "1.3.0"}]}
    ]}
]}.
{relx, [
    {release, {my_app, "0.1.0"}, [my_app]},
    {dev_mode, true},
    {include_erts, false}
]}.
{other_tuple, {a, b}}.
{not_a_tuple, some_atom}.
"""


def same_config(c1, c2):
    return len(c1.terms) == len(c2.terms) and all(
        a.compare(b) for a, b in zip(c1.terms, c2.terms)
    )


@pytest.fixture
def config():
    return parse(ACCESSOR_INPUT)


def test_get_term_found(config):
    term = config.get_term("plugins")
    assert isinstance(term, Tuple)
    assert term.elements[0] == Atom("plugins")


def test_get_term_not_found(config):
    assert config.get_term("non_existent") is None


def test_get_term_quoted_key():
    cfg = parse(ACCESSOR_INPUT + "{'quoted-key', ok}.")
    term = cfg.get_term("quoted-key")
    assert isinstance(term, Tuple)
    assert term.elements[1] == Atom("ok")


def test_get_tuple_elements_found(config):
    elems = config.get_tuple_elements("plugins")
    assert len(elems) == 1
    assert isinstance(elems[0], List)


def test_get_tuple_elements_not_found(config):
    assert config.get_tuple_elements("non_existent") is None


def test_get_tuple_elements_non_list_value(config):
    assert config.get_tuple_elements("not_a_tuple") == (Atom("some_atom"),)


def test_get_tuple_elements_tuple_size_one():
    cfg = parse(ACCESSOR_INPUT + "{single}.")
    assert cfg.get_tuple_elements("single") is None


def test_get_app_name_string(config):
    assert config.get_app_name() == "my_app_string"


def test_get_app_name_atom():
    assert parse("{app_name, my_atom_app}.").get_app_name() == "my_atom_app"


def test_get_app_name_missing():
    assert parse("{deps, []}.").get_app_name() is None


def test_get_app_name_other_type():
    assert parse("{app_name, 42}.").get_app_name() is None


def test_get_plugins(config):
    plugins = config.get_plugins()
    assert len(plugins) == 1
    assert plugins[0].compare(List([Atom("rebar3_hex"), Atom("rebar3_auto")]))


def test_get_plugins_missing():
    assert parse("{deps, []}.").get_plugins() is None


def test_get_profiles_config(config):
    profiles = config.get_profiles_config()
    assert len(profiles) == 1
    assert [p.elements[0].value for p in profiles[0]] == ["dev", "test"]


def test_get_relx_config(config):
    relx = config.get_relx_config()
    assert len(relx) == 1
    assert len(relx[0]) == 3


def test_get_erl_opts_missing():
    assert parse("{deps, []}.").get_erl_opts() is None


def test_get_deps_missing():
    assert parse("{erl_opts, []}.").get_deps() is None


def test_get_deps_found():
    deps = parse('{deps, [{cowboy, "2.9.0"}]}.').get_deps()
    assert deps[0].compare(List([Tuple([Atom("cowboy"), String("2.9.0")])]))


def test_format_simple():
    cfg = parse('{erl_opts, [debug_info]}. {deps, [{lager, "1.0"}]}.')
    formatted = cfg.format(4)
    assert formatted == '{erl_opts, [debug_info]}.\n\n{deps, [{lager, "1.0"}]}.\n'
    assert same_config(cfg, parse(formatted))


def test_format_complex_nested():
    cfg = parse('{deps, [{cowboy, {git, "url", {tag, "2.9"}}}]}.')
    formatted = cfg.format(2)
    assert same_config(cfg, parse(formatted))
    for word in ("deps", "cowboy", "git", "tag"):
        assert word in formatted


def test_format_mixed_list():
    cfg = parse('{opts, [debug, {flag, true}, "string", 123]}.')
    formatted = cfg.format(2)
    assert same_config(cfg, parse(formatted))
    for word in ("debug", "flag", "string", "123"):
        assert word in formatted


def test_format_quoted_atoms_and_escapes():
    cfg = parse(r'{' + "'an-atom'" + r', "a string with \"escapes\""}.')
    formatted = cfg.format(4)
    assert same_config(cfg, parse(formatted))
    assert "'an-atom'" in formatted
    assert "escapes" in formatted


def test_format_empty_config():
    assert RebarConfig().format(4) == ""


def test_format_large_indentation_keeps_short_list():
    assert "[a, b]" in parse("{opts, [a, b]}.").format(8)


def test_format_indentation_sizes():
    cfg = parse('{deps, [{cowboy, {git, "url", {branch, "master"}}}, {jsx, "3.0"}]}.')
    formatted2 = cfg.format(2)
    formatted4 = cfg.format(4)
    assert same_config(cfg, parse(formatted2))
    assert same_config(cfg, parse(formatted4))
    assert len(formatted4) > len(formatted2)


def test_format_block_layout():
    cfg = parse(
        '{deps,[{cowboy,"2.9.0"},{jsx,"3.0.0"},'
        '{lager,{git,"https://example.com/lager.git",{tag,"3.9.2"}}}]}.'
    )
    expected = (
        "{deps, [\n"
        '    {cowboy, "2.9.0"},\n'
        '    {jsx, "3.0.0"},\n'
        '    {lager, {git, "https://example.com/lager.git", {tag, "3.9.2"}}}\n'
        "  ]}.\n"
    )
    assert cfg.format(2) == expected


def test_format_complex_rebar_config():
    text = (
        '{erl_opts,[debug_info,{parse_transform,lager_transform}]}.'
        '{deps,[{cowboy,"2.9.0"},{jsx,"3.0.0"}]}.'
        '{profiles,[{dev,[{deps,[{meck,"0.9.0"}]}]},{test,[{deps,[{proper,"1.3.0"}]}]}]}.'
    )
    cfg = parse(text)
    formatted = cfg.format(4)
    assert same_config(cfg, parse(formatted))
    for word in ("erl_opts", "debug_info", "parse_transform", "deps", "cowboy",
                 "jsx", "profiles", "dev", "test", "proper"):
        assert word in formatted
    assert formatted.split("\n").count("") >= 2


def test_format_deeply_nested():
    text = (
        '{relx,[{release,{my_app,"0.1.0"},[my_app,sasl]},{dev_mode,true},'
        '{include_erts,false},{extended_start_script,true},'
        '{vm_args,"config/vm.args"},{sys_config,"config/sys.config"}]}.'
    )
    cfg = parse(text)
    formatted = cfg.format(2)
    assert same_config(cfg, parse(formatted))
    assert "  " in formatted
    for word in ("release", "my_app", "0.1.0"):
        assert word in formatted


@pytest.mark.parametrize(
    "text",
    [
        "{erl_opts, [debug_info]}.",
        '{deps, [{cowboy, {git, "https://example.com/cowboy.git", {tag, "2.9.0"}}}, {jsx, "3.0.0"}]}.',
        '{erl_opts, [debug_info]}. {deps, [{cowboy, "2.9.0"}]}. '
        '{profiles, [{test, [{deps, [{meck, "0.9.0"}]}]}]}.',
        r"{'complex-name', " + r'"value with \"quotes\""}. {empty_tuple, {}}.',
    ],
)
@pytest.mark.parametrize("indent", [2, 4, 8])
def test_format_equivalence(text, indent):
    original = parse(text)
    formatted = original.format(indent)
    assert formatted.endswith(".\n")
    reparsed = parse(formatted)
    assert len(reparsed.terms) == len(original.terms)
    for before, after in zip(original.terms, reparsed.terms):
        assert before.compare(after) is True