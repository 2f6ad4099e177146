"""Peak Query Pipeline - filter, sort and paginate a peak sequence.

Invariants:
    - Pure functions: no IO, no locking, input sequence never mutated
    - Fixed order: search -> country -> height range -> sort -> paginate
    - Case-insensitive matching uses str.casefold(); ordering is codepoint order
      on the stored string (case-sensitive)
    - Sort is stable for equal keys in both directions
    - page < 1 is clamped to 1; page_size <= 0 yields an empty page

Design Decisions:
    - Blank search/country strings disable the filter, but a non-blank search is
      matched as given (internal and surrounding whitespace kept)
    - Descending order uses sorted(reverse=True), which keeps ties in insertion
      order instead of reversing them
"""

from dataclasses import dataclass
from typing import Iterable

from peaks.core.domain_types import SortField
from peaks.core.peak import Peak


DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 10


@dataclass(frozen=True)
class PeakQuery:
    """Parameters for one read request against the catalog."""
    search: str | None = None
    country: str | None = None
    min_height: int | None = None
    max_height: int | None = None
    sort_by: SortField = SortField.NAME
    sort_descending: bool = False
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def filter_by_search(peaks: Iterable[Peak], search: str | None) -> list[Peak]:
    """Keep peaks whose name contains search, ignoring case."""
    if _is_blank(search):
        return list(peaks)
    needle = search.casefold()
    return [p for p in peaks if needle in (p.name or "").casefold()]


def filter_by_country(peaks: Iterable[Peak], country: str | None) -> list[Peak]:
    """Keep peaks whose country equals country, ignoring case."""
    if _is_blank(country):
        return list(peaks)
    wanted = country.casefold()
    return [p for p in peaks if (p.country or "").casefold() == wanted]


def filter_by_height(
    peaks: Iterable[Peak], min_height: int | None, max_height: int | None,
) -> list[Peak]:
    """Inclusive height bounds; None leaves that side open."""
    result = list(peaks)
    if min_height is not None:
        result = [p for p in result if p.height >= min_height]
    if max_height is not None:
        result = [p for p in result if p.height <= max_height]
    return result


def _sort_key(sort_by: SortField):
    if sort_by is SortField.HEIGHT:
        return lambda p: p.height
    if sort_by is SortField.COUNTRY:
        return lambda p: p.country or ""
    return lambda p: p.name or ""


def sort_peaks(
    peaks: Iterable[Peak], sort_by: SortField, descending: bool = False,
) -> list[Peak]:
    """Stable sort by the requested field."""
    return sorted(peaks, key=_sort_key(sort_by), reverse=descending)


def paginate(peaks: list[Peak], page: int, page_size: int) -> list[Peak]:
    """Slice one 1-based page out of an already ordered list."""
    if page_size <= 0:
        return []
    page = max(page, 1)
    start = (page - 1) * page_size
    return peaks[start:start + page_size]


def run_query(peaks: Iterable[Peak], query: PeakQuery) -> list[Peak]:
    """Apply the full pipeline and return the requested page."""
    result = filter_by_search(peaks, query.search)
    result = filter_by_country(result, query.country)
    result = filter_by_height(result, query.min_height, query.max_height)
    result = sort_peaks(result, query.sort_by, query.sort_descending)
    return paginate(result, query.page, query.page_size)
