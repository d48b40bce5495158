import logging

from .config import Config
from .exceptions import DeliciousError, ValidationError
from .models import Post, PostValues, SimplePost, posts_from_element
from .services import PostService

__all__ = [
    'Config',
    'DeliciousError',
    'ValidationError',
    'Post',
    'PostValues',
    'SimplePost',
    'posts_from_element',
    'PostService',
    'configure_logging',
]


def configure_logging(level=None):
    logging.basicConfig(level=level or Config.LOG_LEVEL,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
