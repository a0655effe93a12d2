import re
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlunsplit

from pydantic import HttpUrl, TypeAdapter, ValidationError

from devconnector.services.exceptions import MalformedURLError


_DEFAULT_PORTS = {"http": 80, "https": 443}
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_MULTI_SLASH_RE = re.compile(r"/{2,}")

_http_url = TypeAdapter(HttpUrl)


def normalize_url(url: Optional[str], force_https: bool = False, field: Optional[str] = None) -> str:
    """
    Canonicalize a URL-like string into an absolute http(s) URL.

    Accepts bare domains (``example.com/me``), scheme-relative values
    (``//example.com``) and values that already carry a scheme. Empty input
    stays empty. The result is stable under repeated normalization.

    Args:
        url: Raw value as received from the client
        force_https: Upgrade ``http`` to ``https``
        field: Name of the request field, reported back on failure

    Returns:
        Normalized URL, or ``""`` for empty input

    Raises:
        MalformedURLError: If the value is not an http(s) URL with a usable host
    """
    if url is None:
        return ""
    raw = url.strip()
    if not raw:
        return ""

    candidate = raw
    if candidate.startswith("//"):
        candidate = "http:" + candidate
    elif not _SCHEME_RE.match(candidate):
        candidate = "http://" + candidate

    try:
        parsed = _http_url.validate_python(candidate)
    except ValidationError as e:
        raise MalformedURLError(raw, field=field) from e

    scheme = parsed.scheme
    host = _strip_www((parsed.host or "").rstrip("."))
    if not host:
        raise MalformedURLError(raw, field=field)
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"

    # the parser already drops the port matching the original scheme
    final_scheme = "https" if force_https else scheme
    port = parsed.port
    if port is not None and port not in (_DEFAULT_PORTS[scheme], _DEFAULT_PORTS[final_scheme]):
        host = f"{host}:{port}"

    path = _MULTI_SLASH_RE.sub("/", parsed.path or "").rstrip("/")

    query = parsed.query or ""
    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        query = urlencode(sorted(pairs, key=lambda pair: pair[0]))

    return urlunsplit((final_scheme, host, path, query, parsed.fragment or ""))


def _strip_www(host: str) -> str:
    # a single leading "www.", never down to a bare TLD
    rest = host[4:]
    if host.startswith("www.") and not rest.startswith("www.") and "." in rest:
        return rest
    return host
