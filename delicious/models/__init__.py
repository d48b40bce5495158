from .post import Post, SimplePost, posts_from_element
from .values import PostValues

__all__ = ['Post', 'SimplePost', 'PostValues', 'posts_from_element']
