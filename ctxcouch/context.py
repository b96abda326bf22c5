"""Cancellation and deadline contexts for blocking calls.

Every operation accepts a context. `BACKGROUND` is never cancelled and has no
deadline; the transport does no context work at all for it.

>>> ctx = with_timeout(5.0)
>>> ctx.remaining() <= 5.0
True
>>> ctx.cancel()
>>> ctx.cancelled
True
"""
import threading
import time

from ctxcouch import exceptions

__all__ = ['Context', 'BACKGROUND', 'with_cancel', 'with_timeout', 'with_deadline']


class Context(object):
    """A cancellation signal with an optional deadline.

    Deadlines are `time.monotonic()` values. A context inherits its parent's
    cancellation and the earlier of its own and its parent's deadlines.
    """

    def __init__(self, parent=None, deadline=None):
        self._parent = parent
        self._deadline = deadline
        self._event = threading.Event()

    def __repr__(self):
        return '<%s cancelled=%r deadline=%r>' % (type(self).__name__, self.cancelled, self.deadline)

    @property
    def deadline(self):
        parent = self._parent.deadline if self._parent is not None else None
        if parent is None:
            return self._deadline
        if self._deadline is None:
            return parent
        return min(parent, self._deadline)

    @property
    def cancelled(self):
        if self._event.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    def cancel(self):
        """Cancel this context and every context derived from it."""
        self._event.set()

    def remaining(self):
        """Seconds left before the deadline, or `None` without one."""
        deadline = self.deadline
        if deadline is None:
            return None
        return max(0.0, deadline - time.monotonic())

    def expired(self):
        deadline = self.deadline
        return deadline is not None and time.monotonic() >= deadline

    def check(self):
        """Raise if the context is done.

        :raise Cancelled: if the context was cancelled
        :raise Timeout: if the deadline has passed
        """
        if self.cancelled:
            raise exceptions.Cancelled('context cancelled')
        if self.expired():
            raise exceptions.Timeout('context deadline exceeded')


class _Background(Context):

    def __init__(self):
        super(_Background, self).__init__()

    def __repr__(self):
        return '<BACKGROUND>'

    def cancel(self):
        raise TypeError('the background context cannot be cancelled')


BACKGROUND = _Background()


def with_cancel(parent=BACKGROUND):
    """Return a cancellable child of `parent`."""
    return Context(parent)


def with_deadline(deadline, parent=BACKGROUND):
    """Return a child of `parent` that expires at the monotonic `deadline`."""
    return Context(parent, deadline)


def with_timeout(seconds, parent=BACKGROUND):
    """Return a child of `parent` that expires `seconds` from now."""
    return Context(parent, time.monotonic() + seconds)
