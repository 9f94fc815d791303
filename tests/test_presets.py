import pytest

from inlinefmt import FormatterConfig
from inlinefmt.plugins import PluginRegistry
from inlinefmt.presets import available_presets, build_formatter, get_preset, install_html
from inlinefmt.presets.text import stylize_delimited, stylize_letters


def test_bundled_presets_are_registered():
    assert {"html", "text"} <= set(available_presets())
    assert get_preset("html") is install_html


def test_unknown_preset_raises_key_error():
    with pytest.raises(KeyError, match="'missing' is not registered"):
        build_formatter("missing")


def test_build_formatter_applies_config():
    formatter = build_formatter("html", FormatterConfig(max_depth=3, use_regex=True))
    assert formatter.config.max_depth == 3
    assert formatter("*x*") == "<em>x</em>"


def test_plugin_registry_rejects_duplicates_and_empty_names():
    registry = PluginRegistry[int]("preset")
    registry.register("one", 1)
    with pytest.raises(ValueError, match="already registered"):
        registry.register("one", 2)
    with pytest.raises(ValueError, match="cannot be empty"):
        registry.register("", 3)
    assert registry.get("one") == 1
    assert "one" in registry
    assert registry.names() == ["one"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("**bold** and *em*", "<strong>bold</strong> and <em>em</em>"),
        ("__strong__ and _em_", "<strong>strong</strong> and <em>em</em>"),
        ("~~old~~ ==new==", "<del>old</del> <mark>new</mark>"),
        ("use `a<b> *x*`", "use <code>a&lt;b&gt; *x*</code>"),
        ("keep snake_case_name intact", "keep snake_case_name intact"),
        ("**a _b_ c**", "<strong>a <em>b</em> c</strong>"),
    ],
)
def test_html_preset(text, expected):
    formatter = build_formatter("html")
    assert formatter.format(text) == expected
    assert formatter.format_regex(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("**bold** text", "B O L D text"),
        ("*hi there*", "h i   t h e r e"),
        ("~~gone now~~", "-g-o-n-e--n-o-w-"),
        ("__big deal__", "_B_I_G___D_E_A_L_"),
        ("_soft_ word", "_s_o_f_t_ word"),
        ("`**raw**`", "`**raw**`"),
    ],
)
def test_text_preset(text, expected):
    assert build_formatter("text").format(text) == expected


def test_stylize_letters_handles_punctuation_and_case():
    assert stylize_letters("") == ""
    assert stylize_letters("ok, go", transform="upper") == "O K,   G O"


def test_stylize_delimited_blank_span():
    assert stylize_delimited("   ", "-") == "--"
