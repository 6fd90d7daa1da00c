import pytest

from ingresskit.docgen.version import Version


def test_parse_major_minor():
    assert Version.parse("1.7") == Version(1, 7)


def test_str_round_trip():
    for text in ("1.7", "0.0", "2.15"):
        assert str(Version.parse(text)) == text


def test_zero_value():
    assert str(Version()) == "0.0"


@pytest.mark.parametrize("text", ["1", "1.2.3", "a.b", "1.x", "", "."])
def test_parse_rejects_bad_format(text):
    with pytest.raises(ValueError):
        Version.parse(text)


def test_equal_is_lower_or_equal():
    assert Version(1, 7).lower_or_equal(Version(1, 7)) is True


def test_newer_minor_is_not_lower():
    assert Version(1, 8).lower_or_equal(Version(1, 7)) is False


def test_older_minor_is_lower():
    assert Version(1, 6).lower_or_equal(Version(1, 7)) is True


def test_newer_major_is_not_lower():
    assert Version(2, 0).lower_or_equal(Version(1, 9)) is False


def test_older_major_is_lower_despite_minor():
    assert Version(1, 9).lower_or_equal(Version(2, 0)) is True


def test_zero_version_is_always_lower_or_equal():
    for active in (Version(0, 0), Version(1, 7), Version(3, 1)):
        assert Version().lower_or_equal(active) is True