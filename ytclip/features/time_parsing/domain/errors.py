from ytclip.core.errors import ValidationError


class ParseError(ValidationError):
    """
    Raised when a user-supplied timestamp cannot be turned into a TimeSpec.
    Keeps the offending text for the error message.
    """
    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid time '{text}': {reason}")


class InvalidTimeFormat(ParseError):
    pass


class TimeComponentOutOfRange(InvalidTimeFormat):
    pass


class EmptyOrNegativeTime(ParseError):
    pass
