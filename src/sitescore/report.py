"""Aggregation of sub-scores into the final eligibility report."""

from typing import Optional

from sitescore.config import WeightTable, default_weights
from sitescore.constants import (
    DOMAIN_AGE_PASS_MONTHS,
    PARAGRAPH_LENGTH_PASS,
    WORD_COUNT_PASS,
)
from sitescore.models import (
    AnalysisReport,
    CriterionResult,
    PageFacts,
    Status,
    SubScores,
)
from sitescore.scoring import (
    accessibility_checks,
    performance_checks,
    score_accessibility,
    score_content,
    score_domain_age,
    score_images,
    score_meta,
    score_performance,
    score_required_pages,
    score_security,
    score_seo,
)
from sitescore.utils import round_half_up


def _check(value, ok: bool, otherwise: Status = Status.FAILED) -> CriterionResult:
    return CriterionResult(value=value, status=Status.PASSED if ok else otherwise)


def _flag(value, ok: bool) -> CriterionResult:
    """Nice-to-have item: a miss is only a warning."""
    return _check(value, ok, Status.WARNING)


def compute_sub_scores(facts: PageFacts, domain_age: int) -> SubScores:
    return SubScores(
        seo=score_seo(facts.seo),
        required_pages=score_required_pages(facts.required_pages),
        security=score_security(facts.security),
        domain_age=score_domain_age(domain_age),
        content=score_content(facts.content),
        images=score_images(facts.images),
        meta=score_meta(facts.meta),
        performance=score_performance(facts.performance),
        accessibility=score_accessibility(facts.accessibility),
    )


def compute_final_score(sub_scores: SubScores, weights: Optional[WeightTable] = None) -> int:
    """Weighted average of the sub-scores, rounded to an integer in 0-100.

    Args:
        sub_scores: The nine category ratings
        weights: Category weights, renormalised by their total

    Returns:
        Final score
    """
    normalized = (weights or default_weights).normalized()
    total = sum(getattr(sub_scores, name) * weight for name, weight in normalized.items())
    return max(0, min(100, round_half_up(total)))


def build_details(facts: PageFacts, domain_age: int) -> dict[str, dict[str, CriterionResult]]:
    """Every displayed item, grouped the way the report presents them.

    Display verdicts are stricter than the points in places: a page without
    H2 headings loses ten SEO points but is only flagged as a warning.
    """
    seo = facts.seo
    pages = facts.required_pages
    security = facts.security
    content = facts.content
    images = facts.images
    meta = facts.meta

    return {
        "seo": {
            "title": _check(seo.title, bool(seo.title)),
            "metaDescription": _check(seo.meta_description, bool(seo.meta_description)),
            "h1Count": _check(seo.h1_count, seo.h1_count > 0),
            "h2Count": _flag(seo.h2_count, seo.h2_count > 0),
            "h3Count": _flag(seo.h3_count, seo.h3_count > 0),
            "internalLinks": _flag(seo.internal_links, seo.internal_links > 0),
            "externalLinks": _flag(seo.external_links, seo.external_links > 0),
        },
        "requiredPages": {
            "privacyPolicy": _check(pages.has_privacy_policy, pages.has_privacy_policy),
            "contactPage": _check(pages.has_contact_page, pages.has_contact_page),
            "aboutPage": _check(pages.has_about_page, pages.has_about_page),
            "termsPage": _flag(pages.has_terms_page, pages.has_terms_page),
        },
        "security": {
            "https": _check(security.is_https, security.is_https),
            "hsts": _flag(security.has_hsts, security.has_hsts),
            "xssProtection": _flag(security.has_xss_protection, security.has_xss_protection),
            "csp": _flag(security.has_csp, security.has_csp),
            "frameOptions": _flag(security.has_frame_options, security.has_frame_options),
        },
        "domain": {
            "age": _check(f"{domain_age} months", domain_age >= DOMAIN_AGE_PASS_MONTHS),
        },
        "content": {
            "wordCount": _check(content.word_count, content.word_count >= WORD_COUNT_PASS),
            "avgParagraphLength": _flag(
                round_half_up(content.avg_paragraph_length),
                content.avg_paragraph_length >= PARAGRAPH_LENGTH_PASS,
            ),
        },
        "images": {
            "total": _flag(images.total, images.total > 0),
            "withAlt": _flag(images.with_alt, images.with_alt > 0),
            "withTitle": _flag(images.with_title, images.with_title > 0),
        },
        "meta": {
            "viewport": _check(meta.has_viewport, meta.has_viewport),
            "robots": _flag(meta.has_robots, meta.has_robots),
            "keywords": _flag(meta.has_keywords, meta.has_keywords),
            "author": _flag(meta.has_author, meta.has_author),
            "socialMeta": _flag(meta.has_open_graph, meta.has_open_graph),
        },
        "performance": performance_checks(facts.performance),
        "accessibility": accessibility_checks(facts.accessibility),
    }


def build_report(
    facts: PageFacts,
    domain_age: int,
    weights: Optional[WeightTable] = None,
) -> AnalysisReport:
    """Score a page and assemble its report.

    Args:
        facts: Extracted page signals
        domain_age: Domain age in months (0 when unknown)
        weights: Category weights, defaults to the stock table

    Returns:
        AnalysisReport with final score and grouped results
    """
    sub_scores = compute_sub_scores(facts, domain_age)

    return AnalysisReport(
        score=compute_final_score(sub_scores, weights),
        sub_scores=sub_scores,
        details=build_details(facts, domain_age),
    )
