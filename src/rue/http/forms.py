"""Form data parsing — URL-encoded request bodies.

Implements ``MultiValueMapping`` for consistent access across
``Headers``, ``QueryParams``, and ``FormData``.

Only ``application/x-www-form-urlencoded`` bodies are parsed, with the
stdlib ``urllib.parse``; other encodings are left to the handler, which
can read the raw body through ``request.body()``.
"""

from urllib.parse import parse_qsl

from rue._internal.multimap import MultiDict

FORM_URLENCODED = "application/x-www-form-urlencoded"

# Methods whose body is merged into the parameter namespace
FORM_METHODS = frozenset({"POST", "PUT", "PATCH"})


class FormData(MultiDict):
    """Immutable parsed form data.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key (checkboxes, multi-selects).

    Usage::

        form = await request.form()
        username = form["username"]
    """

    __slots__ = ()


def media_type(content_type: str | None) -> str:
    """Return the bare, lowercased media type of a Content-Type value.

    ``"application/x-www-form-urlencoded; param=value"`` becomes
    ``"application/x-www-form-urlencoded"``.
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_form_request(method: str, content_type: str | None) -> bool:
    """Whether a request's body should be parsed as form values."""
    return method.upper() in FORM_METHODS and media_type(content_type) == FORM_URLENCODED


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse an URL-encoded form body into FormData.

    Args:
        body: Raw request body bytes.
        content_type: The Content-Type header value.

    Returns:
        Parsed FormData instance.

    Raises:
        ValueError: If the content type is not URL-encoded, or the body
            is not valid UTF-8.
    """
    if media_type(content_type) != FORM_URLENCODED:
        msg = f"Unsupported form content type: {content_type!r}"
        raise ValueError(msg)

    return FormData(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
