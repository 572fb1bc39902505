"""Utility functions."""

import os
import os.path
import re

from .scope import UmaskScope

MAX_UMASK = 0o777
OCTAL_DIGITS = re.compile(r"[0-7]+")


def get_umask():
    """Read the umask currently set for this process."""
    # The umask can’t be read without writing it so set it and reset it immediately.
    with UmaskScope(0) as scope:
        return scope.saved_umask


def parse_umask(value):
    """Turn an int or a string of octal digits into a umask."""
    if isinstance(value, bool):
        raise TypeError("umask must be an int or a string, not bool")
    if isinstance(value, int):
        umask = value
    elif isinstance(value, str):
        digits = value.strip()
        if digits[:2] in ("0o", "0O"):
            digits = digits[2:]
        if not OCTAL_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid umask: {value!r}")
        umask = int(digits, 8)
    else:
        raise TypeError(f"umask must be an int or a string, not {type(value).__name__}")

    if not 0 <= umask <= MAX_UMASK:
        raise ValueError(f"umask out of range: {value!r}")
    return umask


def format_umask(umask):
    """Format a umask the way the shell prints it."""
    return f"{umask:04o}"


def normalize_permissions(path, umask=None):
    """Recursively set the permissions on files and directories based on a umask.

    Without an explicit umask the one currently set for this process is used.
    """
    if umask is None:
        umask = get_umask() or 0
    dir_perm = 0o777 & ~umask
    file_perm = 0o666 & ~umask

    for root, dirs, files in os.walk(path):
        for dir_ in dirs:
            os.chmod(os.path.join(root, dir_), dir_perm)
        for file in files:
            os.chmod(os.path.join(root, file), file_perm)
