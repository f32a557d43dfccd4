"""
================================================================================
Site Checker Tool
================================================================================

Pre-run gate for UI suites: confirms the storefront under test answers HTTP
requests before browsers are launched, so an outage is reported once instead
of as a wall of locator timeouts.

Features:
- Reachability and status code check
- Response time measurement
- Document title extraction from the landing page

================================================================================
"""

import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from loguru import logger


TITLE_PATTERN = re.compile(r"<title[^>]*>\s*(.*?)\s*</title>", re.IGNORECASE | re.DOTALL)


@dataclass
class SiteStatus:
    """
    Result of probing the storefront landing page.

    Attributes:
        url: Probed URL
        reachable: True when a response with status < 400 was received
        status_code: HTTP status code, None on connection failure
        response_time_ms: Round trip time in milliseconds
        title: Document title, when the page has one
        error: Transport error message on failure
    """
    url: str
    reachable: bool = False
    status_code: Optional[int] = None
    response_time_ms: Optional[float] = None
    title: Optional[str] = None
    error: Optional[str] = None
    headers: Dict[str, Any] = field(default_factory=dict)


class SiteChecker:
    """
    Probes the storefront base URL with a single GET request.

    Usage:
        status = SiteChecker("https://www.saucedemo.com/").check()
        if not status.reachable:
            ...
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.BaseTransport = None):
        """
        Initialize checker.

        Args:
            base_url: Storefront base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def check(self) -> SiteStatus:
        """
        Probe the landing page.

        Returns:
            SiteStatus describing the outcome; never raises for transport errors
        """
        status = SiteStatus(url=self.base_url)

        with httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            started = time.perf_counter()
            try:
                response = client.get(self.base_url)
            except httpx.HTTPError as e:
                status.error = str(e) or e.__class__.__name__
                logger.warning(f"Site {self.base_url} unreachable: {status.error}")
                return status

        status.status_code = response.status_code
        status.response_time_ms = (time.perf_counter() - started) * 1000
        status.reachable = response.status_code < 400
        status.headers = {"content-type": response.headers.get("content-type", "")}
        status.title = self._extract_title(response.text)

        return status

    def check_and_log(self) -> bool:
        """
        Probe the site and log the outcome.

        Returns:
            True if the site is reachable
        """
        status = self.check()

        if status.reachable:
            logger.info(
                f"Site check passed: {status.url} -> {status.status_code} "
                f"in {status.response_time_ms:.0f}ms (title: {status.title or 'n/a'})"
            )
        elif status.status_code is not None:
            logger.warning(f"Site check failed: {status.url} -> HTTP {status.status_code}")

        return status.reachable

    @staticmethod
    def _extract_title(html: str) -> Optional[str]:
        match = TITLE_PATTERN.search(html or "")
        return match.group(1) if match else None


__all__ = [
    "SiteStatus",
    "SiteChecker",
]
