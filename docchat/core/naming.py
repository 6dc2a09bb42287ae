"""
Name validation for sessions and files.

Session names double as storage path segments, so the same rule guards
file names and session ids before they reach a storage backend.

Dependencies: re, docchat.boundary.storage.base
System role: Input validation shared by services
"""

import re

from docchat.boundary.storage.base import is_reserved
from docchat.core.exceptions import InvalidNameError

_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1F]')


def is_valid_name(name: str) -> bool:
    """
    Check whether a name is usable as a storage path segment.

    Args:
        name: Candidate session or file name

    Returns:
        bool: False for empty/whitespace names, reserved characters,
            control characters, "." and ".."
    """
    if not name or not name.strip():
        return False
    if name in (".", ".."):
        return False
    return _INVALID_CHARS.search(name) is None


def validate_name(name: str) -> str:
    """
    Validate a name and return it unchanged.

    Raises:
        InvalidNameError: If the name is not usable
    """
    if not is_valid_name(name):
        raise InvalidNameError(name)
    return name


def validate_file_name(name: str) -> str:
    """
    Validate an uploaded file name and return it unchanged.

    Index artifacts and storage markers live next to user files, so their
    names and suffixes are not available for uploads.

    Raises:
        InvalidNameError: If the name is not usable or is reserved
    """
    validate_name(name)
    if is_reserved(name):
        raise InvalidNameError(name, reserved=True)
    return name
