import pytest

from cubcaster.colors import lookup_color
from cubcaster.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    read_xpm_file,
    split_words,
    str_str,
    str_str_quoted,
    strip_comments,
    xpm_from_data,
)


def test_split_words():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_str_str_finds_first():
    text = 'ab"cd"ef"'
    assert str_str(text, '"', len(text)) == text.index('"')
    assert str_str(text, "zz", len(text)) == -1


def test_str_str_longer_than_length():
    assert str_str("abcdef", "cd", 1) == -1


def test_str_str_quoted_skips_quoted():
    text = '"/* inside */" /* outside */'
    assert str_str_quoted(text, "/*", len(text)) == text.rindex("/*")


def test_str_str_quoted_only_quoted():
    text = '"/* inside */"'
    assert str_str_quoted(text, "/*", len(text)) == -1


def test_empty_search_rejected():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)
    with pytest.raises(ValueError):
        str_str_quoted("abc", "", 3)


def test_strip_block_comment():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert result == "a " + " " * len("/* x */") + " b"
    assert len(result) == len(text)


def test_strip_line_comment():
    text = "x // c\ny"
    assert strip_comments(text) == "x " + " " * len("// c\n") + "y"


def test_strip_keeps_quoted_comments():
    text = '"/* keep */" "// keep"'
    assert strip_comments(text) == text


def test_parse_named_and_hex_colors():
    img = parse_xpm(["2 2 2 1", "a c #FF0000", "b c blue", "ab", "ba"])
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == lookup_color("red")
    assert img.get_pixel(1, 0) == lookup_color("blue")
    assert img.get_pixel(0, 1) == lookup_color("blue")
    assert img.get_pixel(1, 1) == lookup_color("red")


def test_two_word_color_name():
    img = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert img.get_pixel(0, 0) == lookup_color("light blue")


def test_none_is_transparent():
    img = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert img.get_pixel(0, 0) == TRANSPARENT == 0xFF000000


def test_unknown_key_is_black():
    img = parse_xpm(["2 1 1 1", "a c white", "az"])
    assert img.get_pixel(0, 0) == lookup_color("white")
    assert img.get_pixel(1, 0) == 0


def test_small_keys_last_definition_wins():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.get_pixel(0, 0) == lookup_color("blue")


def test_large_keys_first_definition_wins():
    img = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert img.get_pixel(0, 0) == lookup_color("red")


def test_two_chars_per_pixel():
    img = parse_xpm(["2 1 2 2", "aa c green", "bb c yellow", "bbaa"])
    assert img.get_pixel(0, 0) == lookup_color("yellow")
    assert img.get_pixel(1, 0) == lookup_color("green")


def test_other_keys_before_c():
    img = parse_xpm(["1 1 1 1", "a s name c cyan", "a"])
    assert img.get_pixel(0, 0) == lookup_color("cyan")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1"],
        ["a b c d"],
        ["1 1"],
        ["1 1 1 1", "a m red", "a"],
        ["1 1 1 1", "a c"],
        ["1 1 1 1", "a c red"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_from_data_matches_parse():
    data = ["2 1 2 1", "a c orange", "b c purple", "ab"]
    first = xpm_from_data(data)
    second = parse_xpm(iter(data))
    assert first.data == second.data


def test_xpm_from_data_rejects_plain_string():
    with pytest.raises(TypeError):
        xpm_from_data("1 1 1 1")


def test_read_xpm_file(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tex[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1",\n'
        '"a c #FF0000", // red\n'
        '"b c blue",\n'
        "/* pixels */\n"
        '"ab",\n'
        '"ba"\n'
        "};\n"
    )
    img = read_xpm_file(path)
    expected = parse_xpm(["2 2 2 1", "a c #FF0000", "b c blue", "ab", "ba"])
    assert (img.width, img.height) == (2, 2)
    assert img.data == expected.data
    assert img.get_pixel(1, 0) == lookup_color("blue")


def test_read_truncated_file(tmp_path):
    path = tmp_path / "bad.xpm"
    path.write_text('static char *x[] = {\n"2 2 1 1",\n"a c red",\n"aa"\n};\n')
    with pytest.raises(XpmError):
        read_xpm_file(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_xpm_file(tmp_path / "missing.xpm")