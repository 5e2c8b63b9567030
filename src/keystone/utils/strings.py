"""
Null-tolerant string helpers.

``is_empty``, ``is_not_empty`` and ``capitalize`` treat None as a valid
input. ``join`` rejects None arguments.
"""

from typing import Iterable, Optional

from ..exceptions import NullArgumentError


def is_empty(text: Optional[str]) -> bool:
    return text is None or len(text) == 0


def is_not_empty(text: Optional[str]) -> bool:
    return not is_empty(text)


def join(strings: Iterable[str], delimiter: str) -> str:
    """Join strings with delimiter between consecutive elements.

    Raises:
        NullArgumentError: strings or delimiter is None
    """
    if strings is None:
        raise NullArgumentError("strings")
    if delimiter is None:
        raise NullArgumentError("delimiter")
    return delimiter.join(strings)


def capitalize(text: Optional[str]) -> Optional[str]:
    """Upper-case the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lower-cased.
    None and "" are returned unchanged.
    """
    if is_empty(text):
        return text
    return text[0].upper() + text[1:]
