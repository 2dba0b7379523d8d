import pytest

from liftscan import jsonio
from liftscan.builder import Builder, BuilderError


def test_nested_dictionary_and_array():
    result = (
        Builder()
        .start_dict()
        .key("a")
        .value(1)
        .key("b")
        .start_array()
        .value("x")
        .value(True)
        .end_array()
        .end_dict()
        .build()
    )
    assert result == {"a": 1, "b": ["x", True]}


def test_scalar_root():
    assert Builder().value("text").build() == "text"


def test_nested_arrays():
    result = (
        Builder()
        .start_array()
        .start_array()
        .value(1)
        .end_array()
        .start_dict()
        .key("k")
        .value(None)
        .end_dict()
        .end_array()
        .build()
    )
    assert result == [[1], {"k": None}]


def test_duplicate_key_keeps_first_value():
    result = (
        Builder().start_dict().key("a").value(1).key("a").value(2).end_dict().build()
    )
    assert result == {"a": 1}


def test_container_as_dictionary_value():
    items = ["p", "q"]
    result = Builder().start_dict().key("items").value(items).end_dict().build()
    assert result == {"items": items}


def test_build_empty_builder_fails():
    with pytest.raises(BuilderError):
        Builder().build()


def test_build_with_open_container_fails():
    with pytest.raises(BuilderError):
        Builder().start_dict().key("a").value(1).build()


def test_key_outside_dictionary_fails():
    with pytest.raises(BuilderError):
        Builder().start_array().key("k")


def test_key_on_empty_builder_fails():
    with pytest.raises(BuilderError):
        Builder().key("k")


def test_value_after_complete_root_fails():
    with pytest.raises(BuilderError):
        Builder().value(1).value(2)


def test_value_in_dictionary_without_key_fails():
    with pytest.raises(BuilderError):
        Builder().start_dict().value(1)


def test_start_dict_inside_dictionary_without_key_fails():
    with pytest.raises(BuilderError):
        Builder().start_dict().start_dict()


def test_end_dict_on_array_fails():
    with pytest.raises(BuilderError):
        Builder().start_array().end_dict()


def test_end_array_on_dict_fails():
    with pytest.raises(BuilderError):
        Builder().start_dict().end_array()


def test_end_without_open_container_fails():
    with pytest.raises(BuilderError):
        Builder().end_array()
    with pytest.raises(BuilderError):
        Builder().end_dict()


def test_start_after_complete_fails():
    with pytest.raises(BuilderError):
        Builder().start_array().end_array().start_dict()


def test_non_string_key_rejected():
    with pytest.raises(TypeError):
        Builder().start_dict().key(5)


def test_round_trip_through_jsonio():
    built = (
        Builder()
        .start_dict()
        .key("id")
        .value(3)
        .key("codes")
        .value(["a", "b"])
        .key("ok")
        .value(False)
        .end_dict()
        .build()
    )
    assert jsonio.loads(jsonio.dumps(built)) == built