from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional
from xml.etree.ElementTree import Element

from ..config import Config
from ..exceptions import ValidationError


def parse_datetime(value: str, fmt: Optional[str] = None) -> datetime:
    """
    Parse an API timestamp such as ``2005-11-29T01:35:10Z`` into an aware datetime.

    Falls back to any ISO 8601 value (``2008-01-02T03:04:05+00:00``, ``2008-01-02``).
    Values without an offset are taken as UTC.
    """
    fmt = fmt or Config.DATETIME_FORMAT
    try:
        return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
    except (TypeError, ValueError):
        pass

    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (AttributeError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid post date: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_others(value: Optional[str]) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def parse_post_element(element: Element) -> Dict[str, Any]:
    """Extract the post fields from a ``<post>`` element. Missing attributes read as ''."""
    values = {
        'url': element.get('href', ''),
        'title': element.get('description', ''),
        'notes': element.get('extended', ''),
        'others': _parse_others(element.get('others')),
        # An empty tag attribute yields [''], kept as the API clients always did.
        'tags': element.get('tag', '').split(Config.TAG_SEPARATOR),
        'date': None,
        'shared': element.get('shared') != 'no',
        'hash': element.get('hash', ''),
    }

    time = element.get('time')
    if time:
        values['date'] = parse_datetime(time)

    return values


def iter_post_elements(root: Element) -> Iterator[Element]:
    if root.tag == 'post':
        yield root
        return
    yield from root.iter('post')
