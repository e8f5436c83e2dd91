"""Site analyzer that drives the fetch, extract and score pipeline."""

import logging
from contextlib import aclosing
from typing import AsyncIterator, Callable, Optional, Union

from sitescore.config import Config, WeightTable
from sitescore.constants import (
    STEP_ACCESSIBILITY,
    STEP_CONTENT,
    STEP_DOMAIN_AGE,
    STEP_FETCH,
    STEP_IMAGES,
    STEP_INIT,
    STEP_META_PERFORMANCE,
    STEP_REQUIRED_PAGES,
    STEP_SCORING,
    STEP_SECURITY,
    STEP_SEO,
)
from sitescore.crawler import PageFetcher, normalize_url
from sitescore.domain_age import DomainAgeResolver
from sitescore.extractor import parse_html, signal_extractors
from sitescore.models import (
    AnalysisReport,
    CompleteEvent,
    ErrorEvent,
    PageFacts,
    ProgressEvent,
)
from sitescore.progress import ProgressEmitter
from sitescore.report import build_report

logger = logging.getLogger(__name__)

AnalysisEvent = Union[ProgressEvent, CompleteEvent, ErrorEvent]

# Progress step announced before each page signal category is extracted
SIGNAL_STEPS = {
    "seo": STEP_SEO,
    "required_pages": STEP_REQUIRED_PAGES,
    "security": STEP_SECURITY,
    "content": STEP_CONTENT,
    "images": STEP_IMAGES,
    "meta": STEP_META_PERFORMANCE,
    "performance": STEP_META_PERFORMANCE,
    "accessibility": STEP_ACCESSIBILITY,
}


class AnalysisError(Exception):
    """An analysis ended with an error event instead of a report."""


class SiteAnalyzer:
    """Analyzes a single page and streams progress followed by the report."""

    def __init__(
        self,
        config: Optional[Config] = None,
        weights: Optional[WeightTable] = None,
        fetcher: Optional[PageFetcher] = None,
        domain_resolver: Optional[DomainAgeResolver] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Fetch and lookup settings, defaults to Config()
            weights: Category weights, defaults to the stock table
            fetcher: Page fetcher, built from config when omitted
            domain_resolver: Domain age resolver, built from config when omitted
        """
        self.config = config or Config()
        self.weights = weights or WeightTable()
        self.fetcher = fetcher or PageFetcher(self.config)
        self.domain_resolver = domain_resolver or DomainAgeResolver(
            timeout=self.config.domain_lookup_timeout
        )

    async def stream(self, target: str) -> AsyncIterator[AnalysisEvent]:
        """Run the analysis, yielding events as it goes.

        Yields one ProgressEvent per step (0 through 10) and then exactly one
        terminal event: CompleteEvent with the report, or ErrorEvent if the
        page could not be fetched or the analysis broke. Closing the
        generator early abandons the analysis.

        Args:
            target: URL or bare host to analyze
        """
        emitter = ProgressEmitter()

        try:
            yield emitter.advance(STEP_INIT)
            url = normalize_url(target)
            logger.info(f"Analyzing {url}")

            yield emitter.advance(STEP_FETCH)
            page = await self.fetcher.fetch(url)
            soup = parse_html(page.html)

            signals = {}
            domain_age = 0
            for name, extract in signal_extractors(soup, url, page.final_url, page.headers):
                step = SIGNAL_STEPS[name]
                # Domain age is not read from the page; it sits between security and content
                if step > STEP_DOMAIN_AGE > emitter.current_step:
                    yield emitter.advance(STEP_DOMAIN_AGE)
                    domain_age = await self.domain_resolver.resolve(url)
                if step > emitter.current_step:
                    yield emitter.advance(step)
                signals[name] = extract()

            yield emitter.advance(STEP_SCORING)
            facts = PageFacts(url=url, **signals)
            report = build_report(facts, domain_age, self.weights)

        except Exception as e:
            logger.error(f"Error analyzing {target}: {e}")
            yield ErrorEvent(message=f"Analysis failed: {e}")
            return

        logger.info(f"Analysis of {url} complete, score {report.score}")
        yield CompleteEvent(result=report)

    async def analyze(
        self,
        target: str,
        on_progress: Optional[Callable[[ProgressEvent], None]] = None,
    ) -> AnalysisReport:
        """Run the analysis to completion.

        Args:
            target: URL or bare host to analyze
            on_progress: Optional callback receiving each ProgressEvent

        Returns:
            The finished AnalysisReport

        Raises:
            AnalysisError: If the analysis ended with an error event
        """
        async with aclosing(self.stream(target)) as events:
            async for event in events:
                if isinstance(event, ProgressEvent):
                    if on_progress:
                        on_progress(event)
                elif isinstance(event, CompleteEvent):
                    return event.result
                else:
                    raise AnalysisError(event.message)

        raise AnalysisError("Analysis ended without a result")
