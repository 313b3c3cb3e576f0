"""A value shared between threads behind a lock."""

import threading


class Guarded:
    """Holds a value that is read and written only while holding a lock."""

    def __init__(self, value):
        self._lock = threading.Lock()
        self._value = value

    def value(self):
        """Return the current value."""
        with self._lock:
            return self._value

    def update(self, fn):
        """Replace the value with ``fn(value)`` atomically and return the result."""
        with self._lock:
            self._value = fn(self._value)
            return self._value