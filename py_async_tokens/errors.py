class ProtocolMisuse(RuntimeError):
    """Raised when a second readable-wait is registered on a reader."""


class EndOfStream(EOFError):
    """The source ran out of bytes before the requested token was complete."""


class InvalidNumber(ValueError):
    """Decoded text was not a valid non-negative number."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid number: {raw}")
        self.raw = raw
