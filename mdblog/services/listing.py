"""Date parsing and ordering for post listings."""

import datetime
from typing import Iterable, List, Optional, Sequence, TypeVar

from mdblog.schemas.blog import PostSummary

P = TypeVar("P", bound=PostSummary)

ISO_DATE_FORMATS = ("%Y-%m-%d",)


def parse_post_date(
    value, formats: Sequence[str] = ISO_DATE_FORMATS
) -> Optional[datetime.datetime]:
    """Parse a front matter date into a naive UTC datetime, or None."""
    if isinstance(value, datetime.datetime):
        return _to_naive_utc(value)
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    for fmt in formats:
        try:
            return datetime.datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return _to_naive_utc(datetime.datetime.fromisoformat(text))
    except ValueError:
        return None


def sort_posts_by_date(
    posts: Iterable[P], formats: Sequence[str] = ISO_DATE_FORMATS
) -> List[P]:
    """Newest first. Posts without a usable date go last, in their original order."""
    dated = []
    undated = []
    for post in posts:
        parsed = parse_post_date(post.date, formats)
        if parsed is None:
            undated.append(post)
        else:
            dated.append((parsed, post))

    dated.sort(key=lambda item: item[0], reverse=True)
    return [post for _, post in dated] + undated


def most_recent(
    posts: Iterable[P], limit: int, formats: Sequence[str] = ISO_DATE_FORMATS
) -> List[P]:
    if limit <= 0:
        return []
    return sort_posts_by_date(posts, formats)[:limit]


def _to_naive_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
