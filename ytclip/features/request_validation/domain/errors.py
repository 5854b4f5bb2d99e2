from ytclip.core.errors import ValidationError


class EmptyUrl(ValidationError):
    def __init__(self):
        super().__init__("URL cannot be empty")


class UnsupportedHost(ValidationError):
    def __init__(self, url: str, host: str):
        self.url = url
        self.host = host
        shown = host or "<none>"
        super().__init__(f"Unsupported video host '{shown}' in URL: {url}")


class NonPositiveDuration(ValidationError):
    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"End time ({end}) must be after start time ({start})")


class SpeedOutOfRange(ValidationError):
    def __init__(self, speed: float, minimum: float, maximum: float):
        self.speed = speed
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Speed must be between {minimum} and {maximum}, got {speed}")


class InvalidOutputPath(ValidationError):
    def __init__(self, output: str):
        self.output = output
        super().__init__(f"Output path must name a file, got '{output}'")
