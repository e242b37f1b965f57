class LineGrepError(Exception):
    """Base class for search errors. All but UnknownOption are fatal."""


class SourceUnavailable(LineGrepError):
    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")


class InvalidPattern(LineGrepError):
    def __init__(self, pattern, reason):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class MalformedLine(LineGrepError):
    def __init__(self, line_number, reason):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number} cannot be decoded: {reason}")


class InvalidConfiguration(LineGrepError):
    def __init__(self, setting, value, reason):
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid {setting} {value!r}: {reason}")


class UnknownOption(LineGrepError):
    """Reported for unrecognised command line options. Logged, never raised."""

    def __init__(self, option):
        self.option = option
        super().__init__(f"Unknown option: {option}")
