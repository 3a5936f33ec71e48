import base64

import pytest

from sendcloud.core.auth import build_auth_headers, build_auth_token, build_uri


@pytest.mark.parametrize(
    "host, path",
    [
        ("https://panel.sendcloud.sc", "api/v2/parcels"),
        ("https://panel.sendcloud.sc/", "/api/v2/parcels"),
        ("https://panel.sendcloud.sc///", "///api/v2/parcels"),
        ("https://panel.sendcloud.sc", "/api/v2/parcels"),
    ],
)
def test_build_uri_joins_with_single_slash(host, path):
    assert build_uri(host, path) == "https://panel.sendcloud.sc/api/v2/parcels"


def test_build_uri_keeps_absolute_urls():
    url = "https://panel.sendcloud.sc/api/v2/labels/label_printer/13?start_from=0"
    assert build_uri("https://other.example", url) == url
    assert build_uri("https://other.example", "http://plain.example/x") == "http://plain.example/x"


def test_build_auth_token_is_basic_base64():
    token = build_auth_token("public", "secret")
    assert base64.b64decode(token) == b"public:secret"


def test_build_auth_headers():
    headers = build_auth_headers("abc")
    assert headers == {"Authorization": "Basic abc", "Content-Type": "application/json"}
