# backend/utils/query.py
import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from models.users import User
from schemas.user import UserQuery
from utils.errors import InvalidArgument

# Sortable fields; any other sort_by value leaves store order untouched
SORT_KEYS: Dict[str, Callable[[User], object]] = {
    "first_name": lambda u: u.first_name,
    "last_name": lambda u: u.last_name,
    "email": lambda u: u.email,
    "username": lambda u: u.username,
    "created_at": lambda u: u.created_at,
}


def _contains(needle: Optional[str], attr: Callable[[User], str]) -> Optional[Callable[[User], bool]]:
    # Blank filters mean "no constraint", not "match the empty string"
    if needle is None or not needle.strip():
        return None
    folded = needle.lower()
    return lambda u: folded in (attr(u) or "").lower()


def _build_filters(query: UserQuery) -> List[Callable[[User], bool]]:
    filters = [
        _contains(query.first_name, lambda u: u.first_name),
        _contains(query.last_name, lambda u: u.last_name),
        _contains(query.email, lambda u: u.email),
        _contains(query.username, lambda u: u.username),
    ]
    if query.is_active is not None:
        wanted = query.is_active
        filters.append(lambda u: u.active == wanted)
    return [f for f in filters if f is not None]


def query_users(users: Iterable[User], query: UserQuery) -> Tuple[List[User], int]:
    """
    Filter, sort and paginate a sequence of users.

    Returns the requested page and the number of users that matched the
    filters before paging. Sorting is stable and compares strings by code
    point, so ties keep their original relative order.
    """
    if query.page_size <= 0:
        raise InvalidArgument("page_size must be a positive integer")

    filters = _build_filters(query)
    matched = [u for u in users if all(f(u) for f in filters)]
    total = len(matched)

    key = SORT_KEYS.get(query.sort_by or "")
    if key is not None:
        matched.sort(key=key, reverse=query.descending)

    page_number = max(query.page_number, 1)
    start = (page_number - 1) * query.page_size
    return matched[start:start + query.page_size], total


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise InvalidArgument("page_size must be a positive integer")
    return math.ceil(total / page_size)
