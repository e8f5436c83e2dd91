"""Tests for score aggregation and report assembly."""

import json

import pytest

from sitescore.config import WeightTable
from sitescore.extractor import extract_page_facts
from sitescore.models import (
    ContentSignals,
    PageFacts,
    SeoSignals,
    Status,
    SubScores,
)
from sitescore.report import (
    build_details,
    build_report,
    compute_final_score,
    compute_sub_scores,
)


class TestComputeFinalScore:
    """Test cases for compute_final_score."""

    def test_perfect_page(self):
        """All sub-scores at 100 give exactly 100 despite the 1.20 weight total."""
        perfect = SubScores(*([100] * 9))
        assert compute_final_score(perfect) == 100

    def test_empty_page(self):
        """All sub-scores at 0 give 0."""
        assert compute_final_score(SubScores()) == 0

    def test_weights_are_renormalised(self):
        """Only SEO at 70 contributes 70 * 0.25 / 1.20, rounded to 15."""
        assert compute_final_score(SubScores(seo=70)) == 15

    def test_custom_weights(self):
        """A table weighting only security returns the security score."""
        weights = WeightTable(
            seo=0, required_pages=0, security=1, domain_age=0, content=0,
            images=0, meta=0, performance=0, accessibility=0,
        )
        assert compute_final_score(SubScores(seo=100, security=60), weights) == 60

    def test_halves_round_up(self):
        """A weighted total of exactly x.5 rounds up."""
        weights = WeightTable(
            seo=1, required_pages=1, security=0, domain_age=0, content=0,
            images=0, meta=0, performance=0, accessibility=0,
        )
        assert compute_final_score(SubScores(seo=70, required_pages=75), weights) == 73


class TestBuildDetails:
    """Test cases for per-item display verdicts."""

    def test_heading_display_is_lenient(self):
        """Missing H2/H3 is a warning while a missing H1 fails."""
        details = build_details(PageFacts(url="http://example.com"), 0)

        assert details["seo"]["h1Count"].status is Status.FAILED
        assert details["seo"]["h2Count"].status is Status.WARNING
        assert details["seo"]["h3Count"].status is Status.WARNING
        assert details["requiredPages"]["termsPage"].status is Status.WARNING
        assert details["requiredPages"]["privacyPolicy"].status is Status.FAILED
        assert details["meta"]["viewport"].status is Status.FAILED
        assert details["meta"]["robots"].status is Status.WARNING

    def test_domain_age_display(self):
        """Domain age is shown in months and passes from six months."""
        young = build_details(PageFacts(url="http://example.com"), 5)["domain"]["age"]
        old = build_details(PageFacts(url="http://example.com"), 6)["domain"]["age"]

        assert young.value == "5 months"
        assert young.status is Status.FAILED
        assert old.value == "6 months"
        assert old.status is Status.PASSED

    def test_content_display(self):
        """Word count passes from 500, average paragraph length is rounded."""
        facts = PageFacts(
            url="http://example.com",
            content=ContentSignals(paragraph_count=3, word_count=500),
        )
        content = build_details(facts, 0)["content"]

        assert content["wordCount"].status is Status.PASSED
        assert content["avgParagraphLength"].value == 167
        assert content["avgParagraphLength"].status is Status.PASSED

    def test_zero_paragraphs_display(self):
        """Zero paragraphs show an average of 0 with a warning."""
        content = build_details(PageFacts(url="http://example.com"), 0)["content"]

        assert content["avgParagraphLength"].value == 0
        assert content["avgParagraphLength"].status is Status.WARNING
        assert content["wordCount"].status is Status.FAILED


class TestBuildReport:
    """Test cases for build_report."""

    @pytest.fixture
    def facts(self, shop_html, shop_url):
        return extract_page_facts(
            shop_html,
            shop_url,
            headers={"strict-transport-security": "max-age=1"},
            final_url="https://shop.example.com/",
        )

    def test_sub_scores(self, facts):
        """Each category is scored from the extracted facts."""
        sub = compute_sub_scores(facts, 8)

        assert sub.seo == 90
        assert sub.required_pages == 80
        assert sub.security == 60
        assert sub.domain_age == 80
        assert sub.content == 20
        assert sub.images == 100
        assert sub.meta == 70
        assert sub.performance == 100
        assert sub.accessibility == 50

    def test_final_score(self, facts):
        """The final score is the renormalised weighted sum."""
        report = build_report(facts, 8)
        # (90*.25 + 80*.15 + 60*.15 + 80*.1 + 20*.15 + 100*.1 + 70*.1 + 100*.1 + 50*.1) / 1.2
        assert report.score == 72
        assert 0 <= report.score <= 100

    def test_wire_shape(self, facts):
        """to_dict exposes only score and details with camelCase groups."""
        data = build_report(facts, 8).to_dict()

        assert set(data) == {"score", "details"}
        assert list(data["details"]) == [
            "seo", "requiredPages", "security", "domain", "content",
            "images", "meta", "performance", "accessibility",
        ]
        assert data["details"]["seo"]["title"] == {"value": "Shop", "status": "passed"}
        assert data["details"]["domain"]["age"] == {"value": "8 months", "status": "passed"}
        assert data["details"]["performance"]["loadTime"]["status"] == "passed"
        assert data["details"]["accessibility"]["links"]["status"] == "warning"

    def test_report_is_deterministic(self, facts):
        """Scoring identical facts twice gives byte-identical JSON."""
        first = build_report(facts, 8).to_json()
        second = build_report(facts, 8).to_json()

        assert first == second
        assert json.loads(first)["score"] == 72

    def test_missing_description_reported_as_null(self):
        """A page without a description reports a null value that fails."""
        facts = PageFacts(url="http://example.com", seo=SeoSignals(title="Shop"))
        data = build_report(facts, 0).to_dict()

        assert data["details"]["seo"]["metaDescription"] == {"value": None, "status": "failed"}
