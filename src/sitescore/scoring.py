"""Criterion scorers.

Nine pure functions, one per category, each mapping the facts it needs to
an integer sub-score in 0-100. Performance and accessibility are scored
from status classifications, which are also what the report displays.
"""

from sitescore.constants import (
    ACCESSIBILITY_PASS_PERCENT,
    ACCESSIBILITY_POINTS,
    ACCESSIBILITY_WARN_PERCENT,
    CONTENT_FLOOR_POINTS,
    DOMAIN_AGE_FLOOR_SCORE,
    DOMAIN_AGE_TIERS,
    IMAGE_POINTS,
    MAX_LOAD_TIME_SECONDS,
    MAX_SCRIPTS,
    MAX_STYLESHEETS,
    META_POINTS,
    MS_PER_RESOURCE,
    PARAGRAPH_LENGTH_TIERS,
    PERFORMANCE_POINTS,
    REQUIRED_PAGES_POINTS,
    SECURITY_POINTS,
    SEO_POINTS,
    WORD_COUNT_TIERS,
)
from sitescore.models import (
    AccessibilitySignals,
    ContentSignals,
    CriterionResult,
    ImageSignals,
    MetaSignals,
    PerformanceSignals,
    RequiredPageSignals,
    SecuritySignals,
    SeoSignals,
    Status,
)
from sitescore.utils import percentage, round_half_up


def _points(checks: dict[str, bool], table: dict[str, int]) -> int:
    return sum(table[name] for name, ok in checks.items() if ok)


def _tier(value: float, tiers: list[tuple[float, int]], floor: int) -> int:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return floor


def _status_points(status: Status, full: int) -> int:
    """Full points when passed, half on a warning, none when failed."""
    if status is Status.PASSED:
        return full
    if status is Status.WARNING:
        return full // 2
    return 0


def score_seo(seo: SeoSignals) -> int:
    return _points(
        {
            "title": bool(seo.title),
            "meta_description": bool(seo.meta_description),
            "h1": seo.h1_count > 0,
            "h2": seo.h2_count > 0,
            "h3": seo.h3_count > 0,
            "internal_links": seo.internal_links > 0,
            "external_links": seo.external_links > 0,
        },
        SEO_POINTS,
    )


def score_required_pages(pages: RequiredPageSignals) -> int:
    return _points(
        {
            "privacy": pages.has_privacy_policy,
            "contact": pages.has_contact_page,
            "about": pages.has_about_page,
            "terms": pages.has_terms_page,
        },
        REQUIRED_PAGES_POINTS,
    )


def score_security(security: SecuritySignals) -> int:
    return _points(
        {
            "https": security.is_https,
            "hsts": security.has_hsts,
            "xss_protection": security.has_xss_protection,
            "csp": security.has_csp,
        },
        SECURITY_POINTS,
    )


def score_domain_age(age_months: int) -> int:
    return _tier(age_months, DOMAIN_AGE_TIERS, DOMAIN_AGE_FLOOR_SCORE)


def score_content(content: ContentSignals) -> int:
    return (
        _tier(content.word_count, WORD_COUNT_TIERS, CONTENT_FLOOR_POINTS)
        + _tier(content.avg_paragraph_length, PARAGRAPH_LENGTH_TIERS, CONTENT_FLOOR_POINTS)
    )


def score_images(images: ImageSignals) -> int:
    return _points(
        {
            "any": images.total > 0,
            "with_alt": images.with_alt > 0,
            "with_title": images.with_title > 0,
        },
        IMAGE_POINTS,
    )


def score_meta(meta: MetaSignals) -> int:
    return _points(
        {
            "viewport": meta.has_viewport,
            "robots": meta.has_robots,
            "keywords": meta.has_keywords,
            "author": meta.has_author,
            "open_graph": meta.has_open_graph,
        },
        META_POINTS,
    )


# ============================================================================
# Performance
# ============================================================================

def estimated_load_time(performance: PerformanceSignals) -> int:
    """Crude load time proxy in whole seconds from the resource count."""
    resources = performance.script_count + performance.stylesheet_count
    return round_half_up(resources * MS_PER_RESOURCE / 1000)


def performance_checks(performance: PerformanceSignals) -> dict[str, CriterionResult]:
    """Classify script count, stylesheet count and estimated load time.

    Returns:
        Mapping of report keys (loadTime, scripts, stylesheets) to results
    """
    scripts = performance.script_count
    stylesheets = performance.stylesheet_count
    load_time = estimated_load_time(performance)

    return {
        "loadTime": CriterionResult(
            value=f"{load_time} seconds (estimated)",
            status=Status.PASSED if load_time <= MAX_LOAD_TIME_SECONDS else Status.WARNING,
        ),
        "scripts": CriterionResult(
            value=f"{scripts} scripts found",
            status=Status.PASSED if scripts <= MAX_SCRIPTS else Status.WARNING,
        ),
        "stylesheets": CriterionResult(
            value=f"{stylesheets} stylesheets found",
            status=Status.PASSED if stylesheets <= MAX_STYLESHEETS else Status.WARNING,
        ),
    }


def score_performance(performance: PerformanceSignals) -> int:
    checks = performance_checks(performance)
    return (
        _status_points(checks["scripts"].status, PERFORMANCE_POINTS["scripts"])
        + _status_points(checks["stylesheets"].status, PERFORMANCE_POINTS["stylesheets"])
        + _status_points(checks["loadTime"].status, PERFORMANCE_POINTS["load_time"])
    )


# ============================================================================
# Accessibility
# ============================================================================

def classify_percentage(percent: int) -> Status:
    if percent >= ACCESSIBILITY_PASS_PERCENT:
        return Status.PASSED
    if percent >= ACCESSIBILITY_WARN_PERCENT:
        return Status.WARNING
    return Status.FAILED


def accessibility_checks(accessibility: AccessibilitySignals) -> dict[str, CriterionResult]:
    """Classify alt text, link text and form label coverage.

    Returns:
        Mapping of report keys (images, links, forms) to results
    """
    a = accessibility
    alt_percent = percentage(a.images_with_alt, a.total_images)
    link_percent = percentage(a.links_with_text, a.total_links)
    form_percent = percentage(a.forms_with_labels, a.total_forms)

    return {
        "images": CriterionResult(
            value=(
                f"{alt_percent}% of images have alt text "
                f"({a.images_with_alt}/{a.total_images})"
            ),
            status=classify_percentage(alt_percent),
        ),
        "links": CriterionResult(
            value=(
                f"{link_percent}% of links have descriptive text "
                f"({a.links_with_text}/{a.total_links})"
            ),
            status=classify_percentage(link_percent),
        ),
        "forms": CriterionResult(
            value=(
                f"{form_percent}% of forms have labels "
                f"({a.forms_with_labels}/{a.total_forms})"
            ),
            status=classify_percentage(form_percent),
        ),
    }


def score_accessibility(accessibility: AccessibilitySignals) -> int:
    checks = accessibility_checks(accessibility)
    return sum(
        _status_points(checks[name].status, points)
        for name, points in ACCESSIBILITY_POINTS.items()
    )
