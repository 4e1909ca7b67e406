# Module: errors.py


class InvalidInput(ValueError):
    """Raised when an image or a clustering parameter cannot be processed."""


class DegenerateClusterWarning(UserWarning):
    """Emitted when some clusters end the refinement without any pixel."""
