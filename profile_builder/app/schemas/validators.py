"""
Reusable field validators for request payloads.
"""
from pydantic import HttpUrl, TypeAdapter, ValidationError

_http_url_adapter = TypeAdapter(HttpUrl)


def http_url(value: str | None) -> str | None:
    """Well-formed absolute http(s) URL. The original string is stored, not the normalized one."""
    if value is None:
        return value
    try:
        _http_url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL") from None
    return value


def optional_http_url(value: str | None) -> str | None:
    """Like http_url, but forms send "" for an untouched URL input."""
    if not value:
        return value
    return http_url(value)


def not_null(value):
    """Partial updates may omit a required field but not null it out."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


def null_as_false(value):
    """Defaulted flags: an explicit null means the default."""
    return False if value is None else value
