"""
Tests for URL normalization.

Tests:
- Bare domains, scheme-relative and schemed input
- Forced https and default-port handling
- Idempotency
- Malformed input
"""

import pytest

from devconnector.services.exceptions import MalformedURLError
from devconnector.utils import normalize_url


class TestNormalizeUrl:
    """Tests for normalize_url."""

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_stays_empty(self, raw):
        assert normalize_url(raw, force_https=True) == ""

    def test_bare_domain_gets_scheme(self):
        assert normalize_url("example.com/jane") == "http://example.com/jane"

    def test_bare_domain_forced_https(self):
        assert normalize_url("twitter.com/jane", force_https=True) == "https://twitter.com/jane"

    def test_scheme_relative(self):
        assert normalize_url("//example.com/a", force_https=True) == "https://example.com/a"

    def test_existing_https_scheme_kept(self):
        assert normalize_url("https://github.com/jane") == "https://github.com/jane"

    def test_http_upgraded_when_forced(self):
        assert normalize_url("http://example.com", force_https=True) == "https://example.com"

    def test_http_kept_without_force(self):
        assert normalize_url("http://example.com") == "http://example.com"

    def test_lowercases_scheme_and_host_and_strips_www(self):
        assert normalize_url("HTTP://WWW.Example.COM/Path", force_https=True) == "https://example.com/Path"

    def test_strips_trailing_and_duplicate_slashes(self):
        assert normalize_url("example.com//a//b/") == "http://example.com/a/b"

    def test_drops_default_ports(self):
        assert normalize_url("http://example.com:80/x") == "http://example.com/x"
        assert normalize_url("https://example.com:443") == "https://example.com"
        assert normalize_url("http://example.com:80", force_https=True) == "https://example.com"
        assert normalize_url("http://example.com:443", force_https=True) == "https://example.com"

    def test_keeps_custom_port(self):
        assert normalize_url("localhost:3000/app") == "http://localhost:3000/app"

    def test_sorts_query_and_keeps_fragment(self):
        assert normalize_url("example.com/?b=2&a=1#top") == "http://example.com?a=1&b=2#top"

    def test_strips_credentials(self):
        assert normalize_url("https://user:pw@example.com") == "https://example.com"

    def test_ipv6_host(self):
        assert normalize_url("http://[::1]:8080/x") == "http://[::1]:8080/x"

    def test_inner_whitespace_is_percent_encoded(self):
        assert normalize_url("example.com/a #", force_https=True) == "https://example.com/a%20"

    def test_parsed_host_is_validated(self):
        with pytest.raises(MalformedURLError) as exc_info:
            normalize_url("https://exa<mple.com", field="twitter")
        assert exc_info.value.failures[0]["field"] == "twitter"

    @pytest.mark.parametrize(
        "raw",
        [
            "example.com",
            "www.linkedin.com/in/jane/",
            "HTTP://Example.com:80/a//b/?z=1&a=2",
            "http://example.com:443",
            "https://example.com:80",
            "//cdn.example.com",
            "www.www.example.com",
            "example.com/search?q=a+b&q2=%20x",
            "http://[::1]:8080",
            "example.com/a #",
            "example.com/a ?",
            "0/ #",
        ],
    )
    @pytest.mark.parametrize("force_https", [True, False])
    def test_idempotent(self, raw, force_https):
        once = normalize_url(raw, force_https=force_https)
        assert normalize_url(once, force_https=force_https) == once

    @pytest.mark.parametrize(
        "raw",
        ["http://", "http://:80", "not a url", "ftp://example.com", "example.com:abc", "http://exa mple.com"],
    )
    def test_malformed_raises(self, raw):
        with pytest.raises(MalformedURLError):
            normalize_url(raw)

    def test_malformed_reports_field(self):
        with pytest.raises(MalformedURLError) as exc_info:
            normalize_url("http://", field="website")
        assert exc_info.value.failures == [
            {"field": "website", "message": "Please include a valid URL"}
        ]
