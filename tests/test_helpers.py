import pytest

from ingresskit.helpers import (
    get_bool_value,
    get_pod_prefix,
    hash_bytes,
    home_dir,
    parse_int,
    parse_size,
    parse_time,
)


def test_home_dir_prefers_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/someone")
    monkeypatch.setenv("USERPROFILE", "/other")
    assert home_dir() == "/home/someone"


def test_home_dir_falls_back(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setenv("USERPROFILE", "/profile")
    assert home_dir() == "/profile"


def test_hash_of_empty_input_is_offset_basis():
    assert hash_bytes(b"") == "6c62272e07bb014262b821756295c58d"


def test_hash_shape_and_determinism():
    digest = hash_bytes(b"haproxy")
    assert len(digest) == 32
    assert digest == hash_bytes(b"haproxy")
    assert digest != hash_bytes(b"haproxY")
    int(digest, 16)


@pytest.mark.parametrize("text", ["", " 1", "1.5", "1_000", "abc", "0x10"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int_accepts_signs():
    assert parse_int("-42") == -42
    assert parse_int("+42") == 42


def test_parse_int_range():
    assert parse_int("9223372036854775807") == 2**63 - 1
    with pytest.raises(ValueError):
        parse_int("9223372036854775808")


def test_parse_time_units_relate():
    assert parse_time("2s") == parse_time("2000ms")
    assert parse_time("3m") == 60 * parse_time("3s")
    assert parse_time("2h") == 60 * parse_time("2m")
    assert parse_time("1d") == 24 * parse_time("1h")
    assert parse_time("250") == parse_time("250ms")


@pytest.mark.parametrize("text", ["s", "xs", "1.5s", "10x", ""])
def test_parse_time_rejects(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_parse_size_units():
    assert parse_size("1k") == 1024
    assert parse_size("5m") == 1024 * parse_size("5k")
    assert parse_size("2g") == 1024 * parse_size("2m")
    assert parse_size("77") == 77


def test_parse_size_rejects():
    with pytest.raises(ValueError):
        parse_size("12kb")


@pytest.mark.parametrize("word", ["1", "t", "T", "TRUE", "true", "True"])
def test_bool_true_words(word):
    assert get_bool_value(word, "opt") is True


@pytest.mark.parametrize("word", ["0", "f", "F", "FALSE", "false", "False"])
def test_bool_false_words(word):
    assert get_bool_value(word, "opt") is False


def test_bool_deprecated_words_warn(capsys):
    assert get_bool_value("ON", "ssl-redirect") is True
    assert get_bool_value("disabled", "ssl-redirect") is False
    err = capsys.readouterr().err
    assert "ssl-redirect - [ON] is DEPRECATED" in err
    assert "[disabled]" in err


def test_bool_rejects_unknown():
    with pytest.raises(ValueError):
        get_bool_value("yes", "opt")


def test_pod_prefix():
    name = "haproxy-kubernetes-ingress-7d8f9c-x2xkz"
    assert get_pod_prefix(name) == "haproxy-kubernetes-ingress"


@pytest.mark.parametrize("name", ["", "single", "one-two"])
def test_pod_prefix_rejects(name):
    with pytest.raises(ValueError, match="incorrect podName format"):
        get_pod_prefix(name)