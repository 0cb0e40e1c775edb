"""
Acquisition strategies.

Two ways of getting a calendar off the network:

* :func:`fetch_structured` retrieves a typed document (the XML feed) and
  hands the body to a deserializer.
* :func:`scrape_page` loads an HTML page with BeautifulSoup and runs the
  month-group and holiday-info queries against it.

Both perform exactly one blocking request and never retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from bs4 import BeautifulSoup, Tag

from .exceptions import DeserializationError, FetchError, MalformedPageError, ProdCalError
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Every scraped calendar must show a full year.
MONTHS_PER_PAGE = 12

XML_CONTENT_TYPE = "application/xml"


@dataclass(frozen=True)
class ScrapedPage:
    """Result of the two structural queries on a calendar page.

    Attributes:
        url: The page that was loaded.
        months: Month-group elements in document order (always twelve).
        holiday_info: The holiday-info container, or ``None`` if the page
            has none.
    """

    url: str
    months: list[Tag]
    holiday_info: Tag | None


def fetch_structured(
    url: str,
    transport: Transport,
    deserialize: Callable[[str], T],
    *,
    accept: str = XML_CONTENT_TYPE,
) -> T:
    """Retrieve *url* and deserialize the body.

    Args:
        url: Document location.
        transport: Collaborator performing the GET.
        deserialize: Turns the body into the source's typed schema.
        accept: Value of the ``Accept`` header.

    Raises:
        TransportError: If the response is not 2xx or the request fails.
        DeserializationError: If the body is empty or malformed.
    """
    content = transport.fetch(url, accept=accept)
    try:
        return deserialize(content)
    except DeserializationError:
        raise
    except (ValueError, TypeError) as exc:
        raise DeserializationError(str(exc)) from exc


def scrape_page(url: str, transport: Transport, month_selector: str, holiday_selector: str) -> ScrapedPage:
    """Load a calendar page and select its month groups and holiday info.

    Args:
        url: Page location.
        transport: Collaborator performing the GET.
        month_selector: CSS selector matching one element per month.
        holiday_selector: CSS selector matching the holiday-info container.

    Raises:
        ValueError: If *url* or a selector is empty.
        FetchError: If loading or querying the page fails.
        MalformedPageError: If the page does not have exactly twelve months.
    """
    if not url or not month_selector or not holiday_selector:
        msg = "url, month_selector and holiday_selector must not be empty"
        raise ValueError(msg)

    try:
        html = transport.fetch(url)
        soup = BeautifulSoup(html, "html.parser")
        months = soup.select(month_selector)
        holiday_info = soup.select_one(holiday_selector)
    except ProdCalError as exc:
        raise FetchError(url, str(exc)) from exc
    except Exception as exc:
        raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc

    logger.debug("Found %d month groups on %s", len(months), url)
    if len(months) != MONTHS_PER_PAGE:
        raise MalformedPageError(found=len(months), expected=MONTHS_PER_PAGE)

    return ScrapedPage(url=url, months=list(months), holiday_info=holiday_info)
