"""
Error types for the type tour.
"""


class TourError(Exception):
    """Raised when a demonstration operation is given input it cannot handle."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
