import pytest

from ruriko.redact import PLACEHOLDER, is_sensitive_key, redact_map, redact_string


def test_redact_string_replaces_all_occurrences():
    value = "abcd1234"
    result = redact_string(f"first {value} then {value}", value)
    assert value not in result
    assert result.count("[REDACTED]") == 2


def test_redact_string_multiple_values():
    result = redact_string("a=alpha-value b=beta-value", "alpha-value", "beta-value")
    assert "alpha-value" not in result
    assert "beta-value" not in result
    assert result.startswith("a=" + PLACEHOLDER)


def test_redact_string_skips_short_values():
    text = "abc is short"
    assert redact_string(text, "abc") == text


def test_redact_string_without_values():
    text = "nothing to hide"
    assert redact_string(text) == text


def test_redact_map():
    original = {"password": "password", "name": "bob", "api_key": "", "token": 5}
    result = redact_map(original)
    assert result["password"] == PLACEHOLDER
    assert result["name"] == "bob"
    assert result["api_key"] == ""
    assert result["token"] == 5
    assert original["password"] == "password"


def test_redact_map_keeps_keys():
    original = {"Auth_Header": "Bearer token", "count": 3}
    assert set(redact_map(original)) == set(original)


@pytest.mark.parametrize(
    "key",
    ["password", "PASSWD", "MATRIX_ACCESS_TOKEN", "client_secret", "api_key", "Authorization", "credentials"],
)
def test_sensitive_keys(key):
    assert is_sensitive_key(key) is True


@pytest.mark.parametrize("key", ["username", "room", "count", "description"])
def test_plain_keys(key):
    assert is_sensitive_key(key) is False