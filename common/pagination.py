from dataclasses import dataclass
from math import ceil
from typing import Any, Dict, List, Optional, Sequence, Tuple

from settings.config import get_settings

DEFAULT_SORT_TYPE = "Username"

# Table column keys understood by the console, mapped to item attributes
SORT_COLUMNS = {
    "Id": "id",
    "Username": "username",
    "RoleName": "role_name",
}


@dataclass
class SortState:
    """
    Sort key and direction of one table.
    Re-selecting the active key flips the direction, any other key starts ascending.
    """
    sort_type: str = DEFAULT_SORT_TYPE
    sort_reverse: bool = True

    def order(self, sort_type: str) -> None:
        self.sort_reverse = (not self.sort_reverse) if self.sort_type == sort_type else False
        self.sort_type = sort_type


class PaginationPreferences:
    """
    Remembers the page size chosen for each table, keyed by a fixed table key.
    """

    def __init__(self, default_count: Optional[int] = None) -> None:
        self._default_count = default_count or get_settings().DEFAULT_PAGINATION_COUNT
        self._counts: Dict[str, int] = {}

    def get_pagination_count(self, key: str) -> int:
        return self._counts.get(key, self._default_count)

    def set_pagination_count(self, key: str, count: int) -> None:
        self._counts[key] = count


def _sort_value(value: Any) -> Any:
    # Table columns compare text case-insensitively
    return value.lower() if isinstance(value, str) else value


def apply_sorting(items: Sequence[Any], sort: SortState) -> List[Any]:
    """
    Sort items by the attribute mapped from the sort key.
    Unknown keys keep the current order.
    """
    attribute = SORT_COLUMNS.get(sort.sort_type)
    if not attribute:
        return list(items)
    return sorted(items, key=lambda item: _sort_value(getattr(item, attribute)), reverse=sort.sort_reverse)


def paginate_list(items: Sequence[Any], sort: SortState, page: int, size: int) -> Tuple[List[Any], int, int, int, int]:
    """
    Sort then slice one page out of an in-memory list.
    Returns: (items, total, page, size, total_pages)
    """
    max_size = get_settings().MAX_PAGINATION_COUNT
    page = max(1, page)
    size = max(1, min(size, max_size))
    ordered = apply_sorting(items, sort)
    total = len(ordered)
    total_pages = ceil(total / size) if total else 1
    start = (page - 1) * size
    return ordered[start:start + size], total, page, size, total_pages
