"""Data models for site eligibility analysis."""

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Optional


class Status(str, Enum):
    """Display-level verdict for an individual checked item."""

    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"


@dataclass(frozen=True)
class CriterionResult:
    """A reported item: the observed value and its verdict."""

    value: Any
    status: Status

    def to_dict(self) -> dict:
        return {"value": self.value, "status": self.status.value}


# ============================================================================
# Page facts
# ============================================================================

@dataclass(frozen=True)
class SeoSignals:
    """Title, description, headings and link split."""

    title: Optional[str] = None
    meta_description: Optional[str] = None
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0
    internal_links: int = 0
    external_links: int = 0


@dataclass(frozen=True)
class RequiredPageSignals:
    """Presence of links to the pages a trustworthy site is expected to have."""

    has_privacy_policy: bool = False
    has_contact_page: bool = False
    has_about_page: bool = False
    has_terms_page: bool = False


@dataclass(frozen=True)
class SecuritySignals:
    """HTTPS and security response headers."""

    is_https: bool = False
    has_hsts: bool = False
    has_xss_protection: bool = False
    has_csp: bool = False
    has_frame_options: bool = False


@dataclass(frozen=True)
class ContentSignals:
    """Paragraph statistics."""

    paragraph_count: int = 0
    word_count: int = 0

    @property
    def avg_paragraph_length(self) -> float:
        """Average words per paragraph, 0 when there are no paragraphs."""
        if self.paragraph_count == 0:
            return 0.0
        return self.word_count / self.paragraph_count


@dataclass(frozen=True)
class ImageSignals:
    """Image counts."""

    total: int = 0
    with_alt: int = 0
    with_title: int = 0


@dataclass(frozen=True)
class MetaSignals:
    """Presence of common meta tags."""

    has_viewport: bool = False
    has_robots: bool = False
    has_keywords: bool = False
    has_author: bool = False
    has_open_graph: bool = False


@dataclass(frozen=True)
class PerformanceSignals:
    """Resource counts used by the load time estimate."""

    script_count: int = 0
    stylesheet_count: int = 0


@dataclass(frozen=True)
class AccessibilitySignals:
    """Counts behind the accessibility percentages."""

    total_images: int = 0
    images_with_alt: int = 0
    total_links: int = 0
    links_with_text: int = 0
    total_forms: int = 0
    forms_with_labels: int = 0


@dataclass(frozen=True)
class PageFacts:
    """Everything extracted from one fetched page."""

    url: str
    seo: SeoSignals = field(default_factory=SeoSignals)
    required_pages: RequiredPageSignals = field(default_factory=RequiredPageSignals)
    security: SecuritySignals = field(default_factory=SecuritySignals)
    content: ContentSignals = field(default_factory=ContentSignals)
    images: ImageSignals = field(default_factory=ImageSignals)
    meta: MetaSignals = field(default_factory=MetaSignals)
    performance: PerformanceSignals = field(default_factory=PerformanceSignals)
    accessibility: AccessibilitySignals = field(default_factory=AccessibilitySignals)


@dataclass(frozen=True)
class FetchResult:
    """A successfully fetched page."""

    url: str
    final_url: str
    status_code: int
    html: str
    headers: dict[str, str] = field(default_factory=dict)
    elapsed: float = 0.0


# ============================================================================
# Scores and report
# ============================================================================

@dataclass(frozen=True)
class SubScores:
    """The nine 0-100 category ratings before weighting."""

    seo: int = 0
    required_pages: int = 0
    security: int = 0
    domain_age: int = 0
    content: int = 0
    images: int = 0
    meta: int = 0
    performance: int = 0
    accessibility: int = 0

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class AnalysisReport:
    """Final score plus every reported item grouped by category."""

    score: int
    sub_scores: SubScores
    details: dict[str, dict[str, CriterionResult]]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "details": {
                group: {name: item.to_dict() for name, item in items.items()}
                for group, items in self.details.items()
            },
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# ============================================================================
# Stream events
# ============================================================================

class _Event:
    """Shared serialisation for stream events."""

    type: ClassVar[str]

    def to_dict(self) -> dict:
        raise NotImplementedError

    def to_sse(self) -> str:
        """Render as a Server-Sent Events frame."""
        return f"data: {json.dumps(self.to_dict())}\n\n"


@dataclass(frozen=True)
class ProgressEvent(_Event):
    """Coarse progress notification."""

    progress: int
    step: int

    type: ClassVar[str] = "progress"

    def to_dict(self) -> dict:
        return {"type": self.type, "progress": self.progress, "step": self.step}


@dataclass(frozen=True)
class CompleteEvent(_Event):
    """Terminal event carrying the finished report."""

    result: AnalysisReport

    type: ClassVar[str] = "complete"

    def to_dict(self) -> dict:
        return {"type": self.type, "result": self.result.to_dict()}


@dataclass(frozen=True)
class ErrorEvent(_Event):
    """Terminal event for an analysis that could not finish."""

    message: str

    type: ClassVar[str] = "error"

    def to_dict(self) -> dict:
        return {"type": self.type, "message": self.message}
