"""Validation helpers for URLs given in the settings file."""

from typing import Annotated

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

_url_adapter = TypeAdapter(Annotated[AnyUrl, UrlConstraints(host_required=True)])


class InvalidURLError(Exception):
    """Exception raised when a URL in a list is malformed."""

    def __init__(self, index: int, raw: str, reason: str = ""):
        self.index = index
        self.raw = raw
        self.reason = reason
        message = f"invalid URL at index {index}: {raw!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def validate_urls(urls: list[str]) -> list[str]:
    """Check that every entry is an absolute URL with a scheme and a host.

    Args:
        urls: URLs to validate, checked in order

    Returns:
        list[str]: The same URLs, unchanged and in the same order

    Raises:
        InvalidURLError: For the first malformed entry
    """
    for index, raw in enumerate(urls):
        if not isinstance(raw, str) or not raw:
            raise InvalidURLError(index, raw, "empty URL")
        if raw != raw.strip():
            raise InvalidURLError(index, raw, "surrounding whitespace")
        # "localhost:3000" parses with "localhost" as its scheme
        if "://" not in raw:
            raise InvalidURLError(index, raw, "missing scheme or host")
        try:
            _url_adapter.validate_python(raw)
        except ValidationError as e:
            raise InvalidURLError(index, raw, e.errors()[0]["msg"]) from e
    return list(urls)
