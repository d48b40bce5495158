from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class PostService(Protocol):
    """The part of a bookmarking API client a Post needs to persist itself."""

    def add_post(self, payload: Dict[str, str]) -> Any:
        """Send a posts/add request; ``replace`` in the payload controls overwriting."""
        ...

    def delete_post(self, url: str) -> Any:
        ...
