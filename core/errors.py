class SizingError(Exception):
    """Base class for every error raised by the sizing engine."""
    pass

class NotFound(SizingError, LookupError):
    """Unknown code or a key combination the catalog does not hold."""
    pass

class OutOfRange(SizingError, ValueError):
    """Numeric input outside the bounds the catalog defines."""
    pass

class Incomplete(SizingError):
    """calculate() was called before every dependent selection was made."""
    pass
