"""Field rules for article payloads.

The rules run in a fixed order and stop at the first failure, so a payload
that breaks several rules always reports the same field.
"""

import re
from datetime import datetime
from urllib.parse import urlsplit

from newsapi.domain.entities import Article
from newsapi.domain.exceptions import ArticleValidationError

_RFC3339 = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)

# whitespace or control characters, which urlsplit would silently strip
_URL_FORBIDDEN = re.compile(r"[\s\x00-\x1f\x7f]")


def parse_timestamp(value: str) -> datetime | None:
    """Parse an RFC 3339 date-time into an aware datetime, or return None."""
    match = _RFC3339.fullmatch(value)
    if match is None:
        return None

    text = match.group("base")
    fraction = match.group("fraction")
    if fraction:
        # datetime only keeps microseconds
        text += "." + fraction[:6].ljust(6, "0")
    offset = match.group("offset")
    text += "+00:00" if offset == "Z" else offset

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def is_absolute_url(value: str) -> bool:
    """True when *value* has both a scheme and a host."""
    if _URL_FORBIDDEN.search(value):
        return False
    try:
        parts = urlsplit(value)
        hostname = parts.hostname
    except ValueError:
        return False
    return bool(parts.scheme) and bool(hostname)


def validate_article(article: Article) -> None:
    """Check *article* against every field rule.

    Raises:
        ArticleValidationError: for the first rule the article breaks.
    """
    if not article.author:
        raise ArticleValidationError("author", "must not be empty")
    if not article.title:
        raise ArticleValidationError("title", "must not be empty")
    if not article.summary:
        raise ArticleValidationError("summary", "must not be empty")
    if parse_timestamp(article.created_at) is None:
        raise ArticleValidationError(
            "created_at", f"'{article.created_at}' is not a valid RFC 3339 timestamp"
        )
    if not is_absolute_url(article.source):
        raise ArticleValidationError(
            "source", f"'{article.source}' is not an absolute URL"
        )
    if len(article.tags) < 1:
        raise ArticleValidationError("tags", "must contain at least one tag")
