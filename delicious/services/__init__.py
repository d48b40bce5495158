from .base import PostService

__all__ = ['PostService']
