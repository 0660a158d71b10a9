import pytest

from hearth.errors import ForbiddenTargetError, InvalidInputError
from hearth.services.url_guard import is_private_host, validate_target_url


@pytest.mark.parametrize("host", [
    "localhost",
    "127.0.0.1",
    "127.5.5.5",
    "0.0.0.0",
    "::1",
    "10.0.0.8",
    "192.168.1.1",
    "169.254.169.254",
    "172.16.0.1",
    "172.31.255.255",
    "printer.local",
    "metadata.google.internal",
    "fe80::1",
    "fd00::1",
])
def test_private_hosts_blocked(host):
    assert is_private_host(host) is True


@pytest.mark.parametrize("host", [
    "example.com",
    "8.8.8.8",
    "172.32.0.1",
    "172.15.0.1",
    "localhost.example.com",
    "2606:4700:4700::1111",
])
def test_public_hosts_allowed(host):
    assert is_private_host(host) is False


def test_validate_trims_and_returns_url():
    assert validate_target_url("  https://example.com/r/1  ") == "https://example.com/r/1"


@pytest.mark.parametrize("url,message", [
    (None, "URL is required."),
    ("   ", "URL is required."),
    ("ftp://example.com/file", "URL must be HTTP or HTTPS."),
    ("javascript:alert(1)", "URL must be HTTP or HTTPS."),
    ("https://", "Invalid URL format."),
    ("http://[::1", "Invalid URL format."),
])
def test_validate_rejects_bad_input(url, message):
    with pytest.raises(InvalidInputError) as exc:
        validate_target_url(url)
    assert exc.value.message == message
    assert exc.value.status_code == 400


def test_validate_rejects_internal_target():
    with pytest.raises(ForbiddenTargetError):
        validate_target_url("http://[::1]:8080/admin")
    with pytest.raises(ForbiddenTargetError):
        validate_target_url("http://LOCALHOST/")
