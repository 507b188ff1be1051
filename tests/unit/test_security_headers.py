import pytest

from api.middleware.security_headers import HSTS_VALUE, security_headers_for


@pytest.mark.unit
def test_hsts_only_outside_development():
    assert "Strict-Transport-Security" not in security_headers_for("/api/v1/posts", "development")
    assert security_headers_for("/api/v1/posts", "production")["Strict-Transport-Security"] == HSTS_VALUE


@pytest.mark.unit
@pytest.mark.parametrize("path", ["/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"])
def test_docs_pages_keep_their_cdn_assets(path):
    headers = security_headers_for(path, "staging")

    assert "Content-Security-Policy" not in headers
    assert headers["X-Content-Type-Options"] == "nosniff"


@pytest.mark.unit
def test_api_paths_get_locked_down_csp():
    headers = security_headers_for("/api/v1/posts/1", "development")

    assert headers["Content-Security-Policy"].startswith("default-src 'none'")
    assert headers["X-Frame-Options"] == "DENY"
