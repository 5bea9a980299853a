import pytest

from boxshop.regex import (
    AFTER_COMMENT,
    AFTER_TAG,
    COMPONENT,
    EMPTY_STRING,
    NUMERIC,
    TAG_CLASS,
    VALID_ENTRY,
    get_match,
    has_match,
    move_to_match,
    replace_string,
    replace_variable,
    replace_variables,
)


def test_get_match_prefers_group():
    assert get_match('<div id="x" class="card">', TAG_CLASS) == "card"


def test_get_match_whole_match_without_group():
    assert get_match("abc123def", "[0-9]+") == "123"


def test_get_match_none_when_absent():
    assert get_match("<div>", TAG_CLASS) is None


def test_component_name_extracted():
    assert get_match('<!-- @component="header.html" -->', COMPONENT) == "header.html"


def test_move_to_match_after_tag():
    line = "<p>rest of line"
    assert move_to_match(line, AFTER_TAG) == "rest of line"


def test_move_to_match_is_suffix():
    line = '   <!-- @component="a.html" -->tail text'
    result = move_to_match(line, AFTER_COMMENT)
    assert result == "tail text"
    assert line.endswith(result)


def test_move_to_match_none():
    assert move_to_match("no tags here", AFTER_TAG) is None


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("12a", False), ("", False), ("12\n", False)],
)
def test_numeric(text, expected):
    assert has_match(text, NUMERIC) is expected


def test_empty_string_pattern():
    assert has_match(" \t\n", EMPTY_STRING) is True
    assert has_match(" x ", EMPTY_STRING) is False


@pytest.mark.parametrize(
    "text, expected",
    [("plain text", True), ("drop;table", False), ('say "hi"', False), ("f(x)", False)],
)
def test_valid_entry(text, expected):
    assert has_match(text, VALID_ENTRY) is expected


def test_replace_variable_first_occurrence():
    assert replace_variable("name=Box", "Hello $(name)!") == "Hello Box!"


def test_replace_variable_without_placeholder():
    assert replace_variable("name=Box", "Hello!") is None


def test_replace_variable_without_pair():
    assert replace_variable("nothing", "$(nothing)") is None


def test_replace_variables_all_pairs_and_occurrences():
    result = replace_variables("a=1&b=2", "$(a)-$(b)-$(a)")
    assert "$(" not in result
    assert result.split("-") == ["1", "2", "1"]


def test_replace_variables_empty_value():
    assert replace_variables("a=", "[$(a)]") == "[]"


def test_replace_variables_unknown_left_alone():
    assert replace_variables("a=1", "$(b)") == "$(b)"


def test_replace_string():
    assert replace_string("user%40example.com", "%40", "@") == "user@example.com"


def test_replace_string_every_occurrence():
    result = replace_string("x-y-z", "-", "+")
    assert result.count("-") == 0
    assert result.count("+") == 2


def test_replace_string_empty_pattern():
    with pytest.raises(ValueError):
        replace_string("abc", "", "x")