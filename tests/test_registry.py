import dataclasses
import re

import pytest

from inlinefmt import ConfigurationError, Formatter, Transformer, TransformerRegistry

from conftest import italic


def test_symbol_sets_both_delimiters_and_defaults(formatter):
    spec = formatter.register(symbol="*", transformer=italic)
    assert spec.open == "*"
    assert spec.close == "*"
    assert spec.recursive is True
    assert spec.padding is True
    assert spec.validate("anything") is True
    assert spec.name == ""
    assert spec.is_literal


def test_open_alone_is_used_for_close(formatter):
    spec = formatter.register(open="==", transformer=italic)
    assert (spec.open, spec.close) == ("==", "==")


def test_explicit_delimiters_override_symbol(formatter):
    spec = formatter.register(symbol="*", close="/", transformer=italic)
    assert (spec.open, spec.close) == ("*", "/")
    spec = formatter.register(symbol="*", open="<", transformer=italic)
    assert (spec.open, spec.close) == ("<", "*")


def test_pattern_delimiter_is_not_literal(formatter):
    spec = formatter.register(open=re.compile(r"\["), close="]", transformer=italic)
    assert not spec.is_literal


def test_registration_order_is_preserved(formatter):
    for name in ("code", "bold", "italic"):
        formatter.register(name=name, symbol=name[0], transformer=italic)
    assert [spec.name for spec in formatter.transformers] == ["code", "bold", "italic"]


@pytest.mark.parametrize(
    "options",
    [
        {"symbol": "*"},
        {"symbol": "*", "transformer": "not callable"},
        {"transformer": italic},
        {"transformer": italic, "close": "*"},
        {"symbol": "", "transformer": italic},
        {"open": "*", "close": "", "transformer": italic},
        {"symbol": 42, "transformer": italic},
        {"symbol": "*", "transformer": italic, "validate": True},
    ],
)
def test_invalid_options_raise_configuration_error(formatter, options):
    with pytest.raises(ConfigurationError):
        formatter.register(**options)
    assert len(formatter.transformers) == 0


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_unusable_pattern_raises_configuration_error(formatter):
    with pytest.raises(ConfigurationError, match="Invalid delimiter pattern"):
        formatter.register(open=re.compile(r"(?P<__span>x)"), close="x", transformer=italic)


def test_registered_transformer_is_immutable(formatter):
    spec = formatter.register(symbol="*", transformer=italic)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.open = "_"


def test_transformers_property_is_a_snapshot(formatter):
    formatter.register(symbol="*", transformer=italic)
    snapshot = formatter.transformers
    formatter.register(symbol="_", transformer=italic)
    assert len(snapshot) == 1
    assert len(formatter.transformers) == 2


def test_add_prebuilt_transformer():
    formatter = Formatter()
    spec = Transformer(open="~", close="~", transformer=str.upper, name="shout")
    assert formatter.add_transformer(spec) is spec
    assert formatter.format("a ~b~") == "a B"


def test_registry_rejects_foreign_objects():
    registry = TransformerRegistry()
    with pytest.raises(ConfigurationError):
        registry.register({"symbol": "*"})
    assert len(registry) == 0


def test_registry_iterates_in_order():
    registry = TransformerRegistry()
    first = registry.register(Transformer(open="*", close="*", transformer=italic))
    second = registry.register(Transformer(open="_", close="_", transformer=italic))
    assert list(registry) == [first, second]


@pytest.mark.parametrize("delimiters", [("", "*"), ("*", "")])
def test_prebuilt_transformer_with_bad_delimiter_is_rejected(delimiters):
    formatter = Formatter()
    opening, closing = delimiters
    with pytest.raises(ConfigurationError):
        formatter.add_transformer(Transformer(open=opening, close=closing, transformer=italic))
    assert formatter.transformers == ()


def test_inline_global_flags_in_pattern_delimiters(formatter):
    spec = formatter.register(
        name="tag",
        open=re.compile(r"(?i)<b>"),
        close=re.compile(r"(?i)</b>"),
        recursive=False,
        transformer=str.upper,
    )
    assert not spec.is_literal
    assert formatter.format("x <B>y</b>") == "x Y"
