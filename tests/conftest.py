"""Shared fixtures for sitescore tests."""

from datetime import datetime, timezone
from types import SimpleNamespace

import httpx
import pytest

from sitescore.config import Config
from sitescore.crawler import PageFetcher
from sitescore.domain_age import DomainAgeResolver


SHOP_URL = "http://shop.example.com"

SHOP_HTML = """
<html>
<head>
    <title>Shop</title>
    <meta name="description" content="Great products">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta name="robots" content="index, follow">
    <meta property="og:title" content="Shop">
    <link rel="stylesheet" href="/a.css">
    <link rel="stylesheet" href="/b.css">
    <link rel="icon" href="/favicon.ico">
    <script src="/app.js"></script>
</head>
<body>
    <h1>Welcome</h1>
    <h3>Deals</h3>
    <h3>New arrivals</h3>
    <img src="a.jpg" alt="A">
    <img src="b.jpg" alt="B" title="Bee">
    <img src="c.jpg">
    <a href="/privacy">Privacy</a>
    <a href="/contact">Contact</a>
    <a href="http://shop.example.com/about">About us</a>
    <a href="https://twitter.com/shop">Twitter</a>
    <a href="https://facebook.com/shop"></a>
    <a name="top">Top</a>
    <p>one two three</p>
    <p>four five</p>
    <form><label for="q">Search</label><input id="q"></form>
    <form><input name="email"></form>
</body>
</html>
"""

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def shop_html():
    return SHOP_HTML


@pytest.fixture
def whois_record():
    """WHOIS record for a domain registered about two years before NOW."""
    return SimpleNamespace(creation_date=datetime(2022, 6, 1))


@pytest.fixture
def shop_url():
    return SHOP_URL


@pytest.fixture
def make_fetcher():
    """Build a PageFetcher whose requests are answered by a handler instead of the network."""

    def factory(handler, **config_overrides) -> PageFetcher:
        config = Config(**config_overrides)
        return PageFetcher(config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_resolver():
    """Build a DomainAgeResolver with a stubbed lookup and a clock fixed at NOW."""

    def factory(lookup, timeout: float = 1.0) -> DomainAgeResolver:
        return DomainAgeResolver(timeout=timeout, lookup=lookup, clock=lambda: NOW)

    return factory


@pytest.fixture
def shop_handler():
    """Serves SHOP_HTML over https, redirecting plain http requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.scheme == "http":
            secure = request.url.copy_with(scheme="https")
            return httpx.Response(301, headers={"Location": str(secure)})
        return httpx.Response(
            200,
            html=SHOP_HTML,
            headers={
                "Strict-Transport-Security": "max-age=31536000",
                "Content-Security-Policy": "default-src 'self'",
            },
        )

    return handler
