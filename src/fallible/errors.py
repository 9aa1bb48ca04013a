from __future__ import annotations


class PreconditionError(TypeError):
    """A required argument was absent or of the wrong kind.

    Signals a programmer error at the call site. It is never turned into a
    ``Failure``.
    """
