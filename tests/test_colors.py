import pytest

from cubcaster.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("deepskyblue", 0xBFFF),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not-a-colour")


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_parse_hex_spec():
    assert parse_color("#ff00ff") == 0xFF00FF
    assert parse_color("#FF0000", None) == lookup_color("red")


def test_parse_hex_stops_at_invalid_digit():
    assert parse_color("#00ff00zz") == lookup_color("green")


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_ignores_end_word():
    assert parse_color("#0000ff", "ignored") == lookup_color("blue")


def test_parse_single_word_name():
    assert parse_color("cyan") == lookup_color("cyan")
    assert parse_color("None") == -1


def test_parse_two_word_name():
    assert parse_color("light", "slate") == 0x778899
    assert parse_color("Navy", "Blue") == lookup_color("navyblue")


def test_parse_unknown_name_is_zero():
    assert parse_color("mystery") == 0
    assert parse_color("mystery", "shade") == 0


def test_parse_overlong_two_word_name_is_truncated():
    long_word = "x" * 80
    assert parse_color(long_word, "red") == 0
    assert parse_color("red", "") == 0