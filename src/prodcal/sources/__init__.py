"""Provider adapters.

One :class:`~prodcal.sources.base.SourceAdapter` subclass per publisher:

* :class:`ConsultantAdapter` - consultant.ru, page scrape only.
* :class:`HeadHunterAdapter` - hh.ru, page scrape only.
* :class:`XmlCalendarAdapter` - xmlcalendar.ru, page scrape and XML feed.
"""

from __future__ import annotations

from .base import PageSelectors, SourceAdapter
from .consultant import ConsultantAdapter
from .headhunter import HeadHunterAdapter
from .xmlcalendar import XmlCalendarAdapter

__all__ = [
    "ConsultantAdapter",
    "HeadHunterAdapter",
    "PageSelectors",
    "SourceAdapter",
    "XmlCalendarAdapter",
]
