import pytest

from boxshop.html import UserState
from boxshop.reader import open_document, read_document


def _load(tmp_path, text, login=UserState.VISIT, name="page.html"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8", newline="")
    return read_document(open_document(login), path)


def test_open_document_keeps_login_state():
    document = open_document(UserState.LOGGED)
    assert document.login == UserState.LOGGED


def test_simple_page_round_trips(tmp_path):
    text = '<html>\n<body>\n<p class="card">$(name)</p>\n</body>\n</html>\n'
    assert _load(tmp_path, text).render() == text


def test_void_tags_and_doctype_round_trip(tmp_path):
    text = "<!DOCTYPE html>\n<html>\n<br/>\n<p>hi</p>\n</html>\n"
    assert _load(tmp_path, text).render() == text


def test_indented_tags_keep_whitespace(tmp_path):
    text = "<div>\n    <span>x</span>\n</div>\n"
    assert _load(tmp_path, text).render() == text


def test_text_over_several_lines_round_trips(tmp_path):
    text = "<p>\nhello\nworld\n</p>\n"
    assert _load(tmp_path, text).render() == text


def test_classes_are_indexed_after_reading(tmp_path):
    document = _load(tmp_path, '<div>\n<p class="card">$(name)</p>\n</div>\n')
    assert document.class_count("card") == 1
    document.set_variables("card", "name=Blue", 0)
    assert "Blue" in document.render()
    assert "$(name)" not in document.render()


def test_replicated_class_renders_copies(tmp_path):
    line = '<p class="card">$(name)</p>\n'
    document = _load(tmp_path, "<div>\n" + line + "</div>\n")
    document.replicate("card", 0, 3)
    assert document.class_count("card") == 3
    assert document.render() == "<div>\n" + line * 3 + "</div>\n"


def test_iflogged_tag_shown_only_to_logged_users(tmp_path):
    tag = "<a>out</a>\n"
    text = "<!-- @iflogged -->\n" + tag
    assert _load(tmp_path, text, UserState.VISIT).render() == ""
    assert _load(tmp_path, text, UserState.LOGGED).render() == tag


def test_ifnlogged_tag_shown_only_to_visitors(tmp_path):
    tag = "<a>in</a>\n"
    text = "<!-- @ifnlogged -->\n" + tag
    assert _load(tmp_path, text, UserState.VISIT).render() == tag
    assert _load(tmp_path, text, UserState.LOGGED).render() == ""


def test_condition_applies_to_next_tag_only(tmp_path):
    first = "<a>one</a>\n"
    second = "<b>two</b>\n"
    document = _load(tmp_path, "<!-- @iflogged -->\n" + first + second)
    assert document.render() == second


def test_component_is_included_in_place(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    header = "<h1>Title</h1>\n"
    (tmp_path / "header.html").write_text(header, encoding="utf-8", newline="")
    page = '<body>\n<!-- @component="header.html" -->\n</body>\n'
    assert _load(tmp_path, page).render() == "<body>\n" + header + "</body>\n"


def test_stray_closing_tag_is_ignored(tmp_path):
    assert _load(tmp_path, "</div>\n").render() == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document(open_document(UserState.VISIT), tmp_path / "missing.html")