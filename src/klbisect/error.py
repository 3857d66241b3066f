class KLError(Exception):
    pass


class InvalidInputError(KLError):
    pass


class GraphFormatError(InvalidInputError):
    pass


class InvariantViolationError(KLError):
    """Raised on an impossible swap. Indicates a bug, not bad input."""
    pass
