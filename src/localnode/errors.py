"""Domain errors for localnode."""


class LocalNodeError(RuntimeError):
    """Raised when the local network cannot be brought up or torn down safely."""
