from __future__ import annotations


class InvariantError(RuntimeError):
    """Raised when scene state breaks an invariant the engine itself maintains.

    These are programming errors, never user errors: callers should let them
    propagate and crash rather than recover.
    """
