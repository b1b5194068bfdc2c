"""
Exceptions for game flow errors.
"""


class IllegalStateTransitionError(Exception):
    """Raised when an operation is invoked in a phase that does not allow it."""

    def __init__(self, operation: str, phase: str, message: str = ""):
        self.operation = operation
        self.phase = phase
        self.message = message or f"Cannot {operation} while game is in phase '{phase}'"
        super().__init__(self.message)
