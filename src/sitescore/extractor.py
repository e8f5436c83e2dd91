"""Signal extraction from fetched markup.

Each function reads one category of facts from a parsed page so the
pipeline can extract them step by step. signal_extractors() lists them in
pipeline order; both the analyzer and extract_page_facts() go through it.
No scripts are executed: only the static markup is inspected.
"""

from typing import Any, Callable, Optional

from bs4 import BeautifulSoup

from sitescore.accessibility import check_accessibility
from sitescore.constants import (
    ABOUT_KEYWORD,
    CONTACT_KEYWORD,
    HEADER_CSP,
    HEADER_FRAME_OPTIONS,
    HEADER_HSTS,
    HEADER_XSS_PROTECTION,
    PRIVACY_KEYWORD,
    TERMS_KEYWORD,
)
from sitescore.models import (
    ContentSignals,
    ImageSignals,
    MetaSignals,
    PageFacts,
    PerformanceSignals,
    RequiredPageSignals,
    SecuritySignals,
    SeoSignals,
)


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _hrefs(soup: BeautifulSoup) -> list[str]:
    """Non-empty href values of all anchors, in document order."""
    hrefs = []
    for link in soup.find_all("a"):
        href = (link.get("href") or "").strip()
        if href:
            hrefs.append(href)
    return hrefs


def _has_meta(soup: BeautifulSoup, name: str) -> bool:
    return soup.find("meta", attrs={"name": name}) is not None


def extract_seo_signals(soup: BeautifulSoup, url: str) -> SeoSignals:
    """Extract title, description, heading counts and the link split.

    A link is internal when its href is root-relative or contains the
    normalized target URL; every other non-empty href is external.

    Args:
        soup: Parsed page
        url: Normalized target URL

    Returns:
        SeoSignals for the page
    """
    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else None

    description_tag = soup.find("meta", attrs={"name": "description"})
    meta_description = description_tag.get("content") if description_tag else None

    internal_links = 0
    external_links = 0
    for href in _hrefs(soup):
        if href.startswith("/") or url in href:
            internal_links += 1
        else:
            external_links += 1

    return SeoSignals(
        title=title,
        meta_description=meta_description,
        h1_count=len(soup.find_all("h1")),
        h2_count=len(soup.find_all("h2")),
        h3_count=len(soup.find_all("h3")),
        internal_links=internal_links,
        external_links=external_links,
    )


def extract_required_pages(soup: BeautifulSoup) -> RequiredPageSignals:
    hrefs = [href.lower() for href in _hrefs(soup)]

    def linked(keyword: str) -> bool:
        return any(keyword in href for href in hrefs)

    return RequiredPageSignals(
        has_privacy_policy=linked(PRIVACY_KEYWORD),
        has_contact_page=linked(CONTACT_KEYWORD),
        has_about_page=linked(ABOUT_KEYWORD),
        has_terms_page=linked(TERMS_KEYWORD),
    )


def extract_security_signals(final_url: str, headers: dict[str, str]) -> SecuritySignals:
    """Extract HTTPS usage and security header presence.

    Args:
        final_url: URL the page was served from, after redirects
        headers: Response headers

    Returns:
        SecuritySignals for the response
    """
    present = {k.lower() for k in headers}

    return SecuritySignals(
        is_https=final_url.lower().startswith("https://"),
        has_hsts=HEADER_HSTS in present,
        has_xss_protection=HEADER_XSS_PROTECTION in present,
        has_csp=HEADER_CSP in present,
        has_frame_options=HEADER_FRAME_OPTIONS in present,
    )


def extract_content_signals(soup: BeautifulSoup) -> ContentSignals:
    paragraphs = soup.find_all("p")
    text = " ".join(p.get_text() for p in paragraphs)

    return ContentSignals(
        paragraph_count=len(paragraphs),
        word_count=len(text.split()),
    )


def extract_image_signals(soup: BeautifulSoup) -> ImageSignals:
    images = soup.find_all("img")

    return ImageSignals(
        total=len(images),
        with_alt=sum(1 for img in images if img.get("alt")),
        with_title=sum(1 for img in images if img.get("title")),
    )


def extract_meta_signals(soup: BeautifulSoup) -> MetaSignals:
    open_graph = soup.find(
        "meta", attrs={"property": lambda p: bool(p) and p.startswith("og:")}
    )

    return MetaSignals(
        has_viewport=_has_meta(soup, "viewport"),
        has_robots=_has_meta(soup, "robots"),
        has_keywords=_has_meta(soup, "keywords"),
        has_author=_has_meta(soup, "author"),
        has_open_graph=open_graph is not None,
    )


def extract_performance_signals(soup: BeautifulSoup) -> PerformanceSignals:
    return PerformanceSignals(
        script_count=len(soup.find_all("script")),
        stylesheet_count=len(soup.find_all("link", rel="stylesheet")),
    )


def signal_extractors(
    soup: BeautifulSoup,
    url: str,
    final_url: str,
    headers: dict[str, str],
) -> list[tuple[str, Callable[[], Any]]]:
    """Deferred extractors for every PageFacts category, in pipeline order.

    Each entry pairs a PageFacts field name with a callable that extracts
    that category, so a caller can report progress between categories.
    """
    return [
        ("seo", lambda: extract_seo_signals(soup, url)),
        ("required_pages", lambda: extract_required_pages(soup)),
        ("security", lambda: extract_security_signals(final_url, headers)),
        ("content", lambda: extract_content_signals(soup)),
        ("images", lambda: extract_image_signals(soup)),
        ("meta", lambda: extract_meta_signals(soup)),
        ("performance", lambda: extract_performance_signals(soup)),
        ("accessibility", lambda: check_accessibility(soup)),
    ]


def extract_page_facts(
    html: str,
    url: str,
    headers: Optional[dict[str, str]] = None,
    final_url: Optional[str] = None,
) -> PageFacts:
    """Extract every signal from a fetched page in one pass.

    Args:
        html: Page markup
        url: Normalized target URL
        headers: Response headers
        final_url: URL after redirects, defaults to url

    Returns:
        PageFacts for the page
    """
    extractors = signal_extractors(parse_html(html), url, final_url or url, headers or {})
    return PageFacts(url=url, **{name: extract() for name, extract in extractors})
