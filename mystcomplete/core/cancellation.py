"""Cooperative cancellation for completion requests.

The host cancels a token when a newer keystroke makes a pending request
stale. Resolvers poll the token before expensive scans and before acting on
collaborator results; a cancelled request yields an empty result, never an
error.
"""

from __future__ import annotations

import threading


class CancellationToken:
    def __init__(self) -> None:
        self._event = threading.Event()

    @classmethod
    def none(cls) -> CancellationToken:
        """Return a fresh token that nobody holds a reference to cancel."""
        return cls()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"
