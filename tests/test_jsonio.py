import io

import pytest

from liftscan.jsonio import ParsingError, dump, dumps, load, loads


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        False,
        0,
        -5,
        3.5,
        "text",
        'esc"\\\n\t\r',
        [],
        {},
        [1, [2, {"k": "v"}]],
        {"b": 1, "a": [None, True, "x"]},
    ],
)
def test_round_trip(value):
    assert loads(dumps(value)) == value


@pytest.mark.parametrize(
    "value, text", [(None, "null"), (True, "true"), (False, "false")]
)
def test_dumps_literals(value, text):
    assert dumps(value) == text


def test_dict_keys_sorted_and_spaced():
    assert dumps({"b": 1, "a": 2}) == '{ "a": 2, "b": 1 }'


def test_array_has_no_spaces():
    assert dumps([1, "x"]) == '[1,"x"]'


def test_float_uses_short_form():
    assert dumps(1e6) == "1e+06"


def test_loads_small_int_is_int():
    result = loads("42")
    assert result == 42
    assert isinstance(result, int)


def test_loads_large_int_becomes_float():
    result = loads("3000000000")
    assert result == 3000000000.0
    assert isinstance(result, float)


def test_loads_fraction_is_float():
    result = loads("2.5")
    assert result == 2.5
    assert isinstance(result, float)


def test_loads_ignores_whitespace():
    assert loads(' { "a" : [ 1 , 2 ] } ') == {"a": [1, 2]}


def test_loads_empty_input_is_null():
    assert loads("   ") is None


def test_duplicate_key_keeps_first():
    assert loads('{"a": 1, "a": 2}') == {"a": 1}


@pytest.mark.parametrize(
    "text",
    ["[1, 2", '{"a": 1', '"abc', '"a\\q"', '"a\nb"', "nulx", "trux", "-", "1.", "abc", "1e999"],
)
def test_invalid_input_raises(text):
    with pytest.raises(ParsingError):
        loads(text)


def test_load_and_dump_streams():
    document = [{"barcode": "4600000000017", "name_product": "Milk"}]
    buffer = io.StringIO()
    dump(document, buffer)
    buffer.seek(0)
    assert load(buffer) == document


def test_dumps_unsupported_type():
    with pytest.raises(TypeError):
        dumps(object())