"""
Errors raised by the matching engine.
"""


class InvalidInputError(ValueError):
    """A profile, internship or argument has the wrong type or shape."""
