import numpy as np
import pytest
from hypothesis import given

from arma.types.value import Value, Nil, Number, Boolean, String, Array, NIL
from arma.errors import ArmaTypeError
from strategies import values

ACCESSORS = {
    "nil": ("is_nil", "as_null"),
    "number": ("is_number", "as_f64"),
    "boolean": ("is_boolean", "as_bool"),
    "string": ("is_string", "as_str"),
    "array": ("is_array", "as_vec"),
}


@pytest.mark.parametrize(
    "value,kind,payload",
    [
        (Nil(), "nil", ()),
        (Number(54.0), "number", 54.0),
        (Boolean(False), "boolean", False),
        (String(""), "string", ""),
        (Array([]), "array", ()),
        (Array([String("hello")]), "array", (String("hello"),)),
    ],
)
def test_exactly_one_accessor_is_present(value, kind, payload):
    for name, (predicate, accessor) in ACCESSORS.items():
        if name == kind:
            assert getattr(value, predicate)() is True
            assert getattr(value, accessor)() == payload
        else:
            assert getattr(value, predicate)() is False
            assert getattr(value, accessor)() is None


@given(values)
def test_predicates_are_exclusive(value):
    flags = [getattr(value, predicate)() for predicate, _ in ACCESSORS.values()]
    assert flags.count(True) == 1


@given(values)
def test_predicate_matches_accessor(value):
    for predicate, accessor in ACCESSORS.values():
        assert getattr(value, predicate)() == (getattr(value, accessor)() is not None)


def test_as_vec_first_element_formats_as_string():
    v = Array([String("hello")]).as_vec()
    assert v is not None
    first = v[0]
    assert first.is_string()
    assert first.to_string() == '"hello"'


@pytest.mark.parametrize(
    "value",
    [Nil(), NIL, Number(0.0), Number(-0.0), Boolean(False), String(""), Array([])],
)
def test_is_empty(value):
    assert value.is_empty()


@pytest.mark.parametrize(
    "value",
    [
        Number(55.0),
        Number(-1e-300),
        Number(float("nan")),
        Number(float("inf")),
        Boolean(True),
        String("test"),
        String(" "),
        Array([Boolean(False)]),
        Array([Nil()]),
    ],
)
def test_is_not_empty(value):
    assert not value.is_empty()


def test_payloads_are_coerced():
    assert Number(54).as_f64() == 54.0
    assert isinstance(Number(54).as_f64(), float)
    assert String(np.str_("abc")) == String("abc")
    assert Array([NIL, Number(1)]).as_vec() == (NIL, Number(1.0))


def test_number_rejects_non_numeric_payload():
    with pytest.raises(ArmaTypeError):
        Number("1.5")


@pytest.mark.parametrize("payload", [1, 0, "false", None, np.bool_(True)])
def test_boolean_rejects_non_bool_payload(payload):
    with pytest.raises(ArmaTypeError):
        Boolean(payload)


@pytest.mark.parametrize("payload", [None, 5, b"text", ["a"]])
def test_string_rejects_non_str_payload(payload):
    with pytest.raises(ArmaTypeError):
        String(payload)


def test_value_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Value()


def test_array_rejects_native_elements():
    with pytest.raises(ArmaTypeError):
        Array([1, 2])


def test_values_are_immutable():
    n = Number(1.0)
    with pytest.raises(AttributeError):
        n.value = 2.0
    a = Array([n])
    assert isinstance(a.as_vec(), tuple)


def test_value_is_closed():
    with pytest.raises(TypeError):
        class Object(Value):
            pass


def test_repr_is_constructor_style():
    assert repr(Nil()) == "Nil()"
    assert repr(Number(54)) == "Number(54.0)"
    assert repr(String('a"b')) == "String('a\"b')"
    assert repr(Array([Boolean(True)])) == "Array([Boolean(True)])"


def test_from_native_bridges_to_outbound_conversion():
    assert Value.from_native([1, None, "a"]) == Array([Number(1), NIL, String("a")])
