import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from xml.etree.ElementTree import Element

from flask_restx import marshal

from ..config import Config
from ..exceptions import ValidationError
from ..services.base import PostService
from ..utils.xml import iter_post_elements, parse_post_element
from .api_models import post_fields, simple_post_fields
from .values import PostValues

logger = logging.getLogger(__name__)


class SimplePost:
    """A read-only post as published in the public JSON feeds."""

    def __init__(self, url: str, title: str, notes: str = '', tags: Optional[List[str]] = None):
        self.url = url
        self.title = title
        self.notes = notes
        self.tags = list(tags) if tags is not None else []

    @classmethod
    def from_feed(cls, entry: Mapping[str, Any]) -> 'SimplePost':
        """Build from a feed entry using the short keys u, d, n and t."""
        if not isinstance(entry, Mapping) or not entry.get('u') or not entry.get('d'):
            raise ValidationError("Feed entry must contain at least 'u' (url) and 'd' (title)")
        return cls(entry['u'], entry['d'], entry.get('n') or '', entry.get('t'))

    def get_url(self) -> str:
        return self.url

    def get_title(self) -> str:
        return self.title

    def get_notes(self) -> str:
        return self.notes

    def get_tags(self) -> List[str]:
        return self.tags

    def to_dict(self) -> Dict[str, Any]:
        return marshal(self, simple_post_fields)

    def __repr__(self):
        return f'<{type(self).__name__} {self.url}: {self.title}>'


class Post(SimplePost):
    """
    A post owned by the authenticated user, which can be edited, saved and deleted.

    ``others`` is only filled in by the "get posts" listing; posts from the
    "all" and "recent" listings leave it as None.
    """

    def __init__(self, service: PostService, values: Union[Mapping[str, Any], PostValues, Element]):
        if isinstance(values, Element):
            values = parse_post_element(values)
            logger.debug(f"Parsed post element for {values['url']!r}")

        # Validate everything before touching the instance.
        parsed = PostValues.from_mapping(values)

        self.service = service
        super().__init__(parsed.url, parsed.title, parsed.notes, parsed.tags)
        self.date: Optional[datetime] = parsed.date
        self.others: Optional[int] = parsed.others
        self.shared: bool = parsed.shared
        self.hash: Optional[str] = parsed.hash

    def set_title(self, title) -> 'Post':
        self.title = str(title)
        return self

    def set_notes(self, notes) -> 'Post':
        self.notes = str(notes)
        return self

    def set_tags(self, tags: Iterable[str]) -> 'Post':
        self.tags = list(tags)
        return self

    def add_tag(self, tag) -> 'Post':
        self.tags.append(str(tag))
        return self

    def remove_tag(self, tag) -> 'Post':
        tag = str(tag)
        self.tags = [t for t in self.tags if t != tag]
        return self

    def get_date(self) -> Optional[datetime]:
        return self.date

    def get_others(self) -> Optional[int]:
        return self.others

    def get_hash(self) -> Optional[str]:
        return self.hash

    def get_shared(self) -> bool:
        return self.shared

    def set_shared(self, shared) -> 'Post':
        self.shared = bool(shared)
        return self

    def to_payload(self) -> Dict[str, str]:
        return {
            'url': self.url,
            'description': self.title,
            'extended': self.notes,
            'shared': 'yes' if self.shared else 'no',
            'tags': Config.TAG_SEPARATOR.join(self.tags),
            'replace': 'yes',
        }

    def save(self):
        """Add the post, replacing any existing post with the same URL. Returns the service response."""
        logger.debug(f"Saving post {self.url!r}")
        return self.service.add_post(self.to_payload())

    def delete(self):
        logger.debug(f"Deleting post {self.url!r}")
        return self.service.delete_post(self.url)

    def to_dict(self) -> Dict[str, Any]:
        return marshal(self, post_fields)


def posts_from_element(service: PostService, root: Element) -> List[Post]:
    """Build one Post per ``<post>`` element of a parsed listing response."""
    posts = [Post(service, element) for element in iter_post_elements(root)]
    logger.debug(f"Built {len(posts)} posts from <{root.tag}> element")
    return posts
