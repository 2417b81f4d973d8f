"""Orderly shutdown: save the working copy when the user interrupts or input ends."""

from __future__ import annotations

import signal
import sys
import threading
from collections import deque
from collections.abc import Mapping
from typing import TextIO

from .file_manager import Storage
from .user import User


class ExitRequested(Exception):
    """Raised when the session must stop because of a signal or lost input."""


class ShutdownGuard:
    """Tracks exit requests and makes sure the bank data is saved exactly once."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        self.saved = False
        self._exiting = threading.Event()
        self._pending: deque[str] = deque()

    @property
    def exiting(self) -> bool:
        """True once an exit has been requested."""
        return self._exiting.is_set()

    def request_exit(self, signum: int | None = None, frame: object = None) -> None:
        """Signal handler: flag the exit and interrupt whatever is running.

        If the data has already been saved the process exits at once.
        """
        self._exiting.set()
        if self.saved:
            raise SystemExit(0)
        raise ExitRequested

    def install(self) -> dict[int, object]:
        """Route interrupt and termination signals to :meth:`request_exit`.

        Returns the handlers that were replaced, keyed by signal number.
        """
        previous: dict[int, object] = {}
        names = ("SIGINT", "SIGTERM", "SIGBREAK", "SIGHUP")
        for name in names:
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            try:
                previous[signum] = signal.signal(signum, self.request_exit)
            except (OSError, ValueError):
                continue
        return previous

    def finish(self, users: Mapping[str, User]) -> bool:
        """Write the users out and promote the working copy to the data file.

        Returns whether a working copy was promoted.
        """
        self._exiting.set()
        self.storage.save(users)
        promoted = self.storage.safe_save()
        self.saved = True
        return promoted

    def _abort(self, users: Mapping[str, User], stdout: TextIO) -> None:
        if self.saved:
            return
        stdout.write("\nexiting...\n")
        stdout.flush()
        self.finish(users)

    def read(
        self,
        prompt: str,
        users: Mapping[str, User],
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> str:
        """Show ``prompt`` and return the next whitespace-separated word of input.

        When input runs out or an exit has been requested, the users are saved
        and :class:`ExitRequested` is raised.
        """
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout
        stdout.write(prompt)
        stdout.flush()
        try:
            while not self._pending:
                line = stdin.readline()
                if not line:
                    raise ExitRequested
                self._pending.extend(line.split())
            if self.exiting:
                raise ExitRequested
            return self._pending.popleft()
        except ExitRequested:
            self._abort(users, stdout)
            raise