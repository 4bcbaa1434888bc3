import pytest

from searchcore.json_builder import JSONBuilder


def test_to_json_works_with_pairs():
    jb = JSONBuilder("")
    jb.to_json("name", "John", "age", 30)
    result = jb.dump()
    assert '"name": "John' in result
    assert '"age": "30"' in result


def test_dump_outputs_correct_format():
    jb = JSONBuilder("")
    jb.to_json("key", "value")
    result = jb.dump()
    assert "{" in result
    assert "}" in result
    assert '"key": "value"' in result


def test_dump_single_pair_exact():
    assert JSONBuilder("").to_json("key", "value").dump() == '{\n"key": "value"\n}'


def test_load_replaces_content():
    jb = JSONBuilder("")
    jb.to_json("x", "1")
    jb.load('{ "a": "2", "b": "3" }')
    result = jb.dump()
    assert '"a": "2"' in result
    assert '"b": "3"' in result
    assert '"x": "1"' not in result


def test_constructor_parses_simple_json():
    jb = JSONBuilder('{"one": "1", "two": "2"}')
    result = jb.dump()
    assert '"one": "1"' in result
    assert '"two": "2"' in result


def test_to_json_returns_builder():
    jb = JSONBuilder()
    assert jb.to_json("a", "b") is jb


def test_to_json_replaces_previous_content():
    jb = JSONBuilder('{"old": "1"}')
    jb.to_json("new", "2")
    result = jb.dump()
    assert '"new": "2"' in result
    assert "old" not in result


def test_to_json_ignores_trailing_key():
    result = JSONBuilder().to_json("a", "1", "dangling").dump()
    assert '"a": "1"' in result
    assert "dangling" not in result


def test_float_values_use_six_decimals():
    result = JSONBuilder().to_json("pi", 1.5).dump()
    assert '"pi": "1.500000"' in result


def test_list_values_keep_commas():
    result = JSONBuilder('{"tags": [a, b], "n": 1}').dump()
    assert '"tags": "[a,b]"' in result
    assert '"n": "1"' in result


def test_unquoted_input_gets_quoted():
    result = JSONBuilder("{k: v}").dump()
    assert result == '{\n"k": "v"\n}'


def test_unsupported_value_type_raises():
    with pytest.raises(TypeError):
        JSONBuilder().to_json("a", object())