"""Single-page site eligibility scoring with streamed progress."""

__version__ = "0.1.0"

from sitescore.analyzer import SiteAnalyzer, AnalysisError
from sitescore.crawler import PageFetcher, FetchError, normalize_url
from sitescore.domain_age import DomainAgeResolver
from sitescore.extractor import extract_page_facts
from sitescore.report import build_report, compute_final_score
from sitescore.progress import ProgressEmitter
from sitescore.models import (
    Status,
    CriterionResult,
    PageFacts,
    SubScores,
    AnalysisReport,
    ProgressEvent,
    CompleteEvent,
    ErrorEvent,
)
from sitescore.config import Config, WeightTable

__all__ = [
    # Core
    "SiteAnalyzer",
    "AnalysisError",
    "PageFetcher",
    "FetchError",
    "normalize_url",
    "DomainAgeResolver",
    "extract_page_facts",
    "build_report",
    "compute_final_score",
    "ProgressEmitter",
    # Models
    "Status",
    "CriterionResult",
    "PageFacts",
    "SubScores",
    "AnalysisReport",
    "ProgressEvent",
    "CompleteEvent",
    "ErrorEvent",
    # Config
    "Config",
    "WeightTable",
]
