from typing import List, Dict, Any, Optional


class DeliciousError(Exception):
    """Base class for errors raised by the delicious package."""


class ValidationError(DeliciousError, ValueError):
    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def __str__(self):
        if not self.errors:
            return self.message
        details = '; '.join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in self.errors
        )
        return f"{self.message} ({details})"
