# mylife/core/errors.py

class UnauthenticatedError(Exception):
    """The caller has no usable identity (no user, or a user without a profile)."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message
