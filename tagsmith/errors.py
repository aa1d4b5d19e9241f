class TagsmithError(Exception):
    """Base class for every error raised by tagsmith."""


class InvalidArgument(TagsmithError, TypeError):
    """An argument of the wrong shape was passed to a public operation.

    The message names the operation, the position of the offending
    argument, the kind that was expected and the type actually given::

        open_tag - Expected string for argument 1 but got int instead
    """

    def __init__(self, function_name, position, expected, given, detail=""):
        self.function_name = function_name
        self.position = position
        self.expected = expected
        self.detail = detail
        self.given_type = type(given).__name__
        where = f" ({detail})" if detail else ""
        super().__init__(
            f"{function_name} - Expected {expected} for argument {position}{where} "
            f"but got {self.given_type} instead"
        )


class InvalidProfile(TagsmithError, ValueError):
    """The requested output profile is not one of the supported ones."""

    def __init__(self, name, supported):
        self.name = name
        self.supported = list(supported)
        super().__init__(f"Invalid profile name {name!r}, expected one of: {', '.join(self.supported)}")


def check_type(function_name, position, value, types, expected):
    """Raise :class:`InvalidArgument` unless *value* is an instance of *types*."""
    if not isinstance(value, types):
        raise InvalidArgument(function_name, position, expected, value)
    return value
