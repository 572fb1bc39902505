"""Temporarily override the process umask for the duration of a block.

The umask is process-wide state. Nothing here serializes access to it, so two
scopes must never be active at the same time in different threads.
"""

import os
import sys
from functools import wraps

# Windows has no umask worth speaking of: every scope is a no-op there.
HAS_UMASK = sys.platform != "win32"


def _swap_umask(new_umask):
    return os.umask(new_umask)


def _restore_umask(saved_umask):
    os.umask(saved_umask)


def _swap_umask_noop(new_umask):
    return None


def _restore_umask_noop(saved_umask):
    pass


if not HAS_UMASK:
    _swap_umask = _swap_umask_noop
    _restore_umask = _restore_umask_noop


class UmaskScope:
    """Set a new umask when entered and restore the previous one on exit.

    Passing ``None`` leaves the umask untouched and there is nothing to restore.
    A scope can only be entered once and can't be copied.
    """

    def __init__(self, new_umask=None):
        """Create a new scope for the given umask."""
        self._new_umask = new_umask
        self._saved_umask = None
        self._entered = False

    @property
    def new_umask(self):
        """Get the umask requested for this scope."""
        return self._new_umask

    @property
    def saved_umask(self):
        """Get the umask that will be restored on exit (if any)."""
        return self._saved_umask

    def __enter__(self):
        """Apply the requested umask and remember the previous one."""
        if self._entered:
            raise RuntimeError("A UmaskScope can only be entered once.")
        self._entered = True
        if self._new_umask is not None:
            self._saved_umask = _swap_umask(self._new_umask)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Restore the previous umask."""
        if self._saved_umask is not None:
            _restore_umask(self._saved_umask)
        return False

    def __copy__(self):
        """Refuse to copy: only one scope may restore the saved umask."""
        raise TypeError(f"{self.__class__.__name__} objects can't be copied.")

    def __deepcopy__(self, memo):
        """Refuse to copy: only one scope may restore the saved umask."""
        raise TypeError(f"{self.__class__.__name__} objects can't be copied.")

    def __repr__(self):
        """Return a string representation of this scope."""
        if self._new_umask is None:
            return f"{self.__class__.__name__}(None)"
        return f"{self.__class__.__name__}(0o{self._new_umask:03o})"


def with_umask(new_umask):
    """Run each call of the decorated function in its own UmaskScope."""

    def decorator(func):
        @wraps(func)
        def inner(*args, **kwargs):
            with UmaskScope(new_umask):
                return func(*args, **kwargs)

        return inner

    return decorator
