"""Errors and warnings raised by tinct."""


class ColorParseError(ValueError):
    """Base class for color input that cannot be interpreted."""


class InvalidChannelError(ColorParseError):
    """A channel token is not a finite number."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid channel value: {token!r}")


class AmbiguousRatioWarning(UserWarning):
    """A literal 1 in a structured record was read as full scale (100%)."""
