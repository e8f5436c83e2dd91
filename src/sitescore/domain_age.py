"""Best-effort domain registration age lookup.

The lookup is advisory: any failure yields an age of 0 months and the
analysis carries on.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional
from urllib.parse import urlparse

import whois

from sitescore.constants import DAYS_PER_MONTH, DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS
from sitescore.utils import round_half_up

logger = logging.getLogger(__name__)


def _creation_date(record: Any) -> Optional[datetime]:
    """Pull a usable creation date out of a WHOIS record."""
    if record is None:
        return None
    if isinstance(record, dict):
        creation = record.get("creation_date")
    else:
        creation = getattr(record, "creation_date", None)

    # Some registries report several dates; the earliest is the registration
    if isinstance(creation, (list, tuple)):
        dates = [d for d in creation if isinstance(d, datetime)]
        creation = min(dates, key=_as_utc) if dates else None

    if not isinstance(creation, datetime):
        return None
    return _as_utc(creation)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def months_between(start: datetime, end: datetime) -> int:
    """Elapsed 30-day months from start to end, never negative."""
    elapsed = _as_utc(end) - _as_utc(start)
    if elapsed.total_seconds() <= 0:
        return 0
    return round_half_up(elapsed / timedelta(days=DAYS_PER_MONTH))


class DomainAgeResolver:
    """Resolves how many months ago a target's domain was registered."""

    def __init__(
        self,
        timeout: float = DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS,
        lookup: Optional[Callable[[str], Any]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the resolver.

        Args:
            timeout: Upper bound for the lookup in seconds
            lookup: Blocking WHOIS function called as lookup(host, timeout=...),
                defaults to whois.whois
            clock: Returns the current time, defaults to datetime.now(timezone.utc)
        """
        self.timeout = timeout
        self.lookup = lookup or whois.whois
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def resolve(self, url: str) -> int:
        """Look up the domain age for a URL.

        A single attempt is made. Lookup errors, timeouts and records without
        a creation date all give 0.

        Args:
            url: Normalized target URL

        Returns:
            Age in months, or 0 when unknown
        """
        host = urlparse(url).hostname
        if not host:
            logger.warning(f"No host in {url}, domain age unknown")
            return 0

        # The socket timeout ends the worker thread; wait_for only bounds our wait
        try:
            record = await asyncio.wait_for(
                asyncio.to_thread(self.lookup, host, timeout=self.timeout),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Domain lookup for {host} timed out after {self.timeout}s")
            return 0
        except Exception as e:
            logger.warning(f"Error getting domain age for {host}: {e}")
            return 0

        created = _creation_date(record)
        if created is None:
            logger.warning(f"No creation date in WHOIS record for {host}")
            return 0

        age = months_between(created, self.clock())
        logger.debug(f"Domain {host} registered {created:%Y-%m-%d}, {age} months old")
        return age
