"""
Exception types raised by groupconf.

Read and parse failures are fatal and never leave a partial Document
behind. Cast failures are local: they only concern the one value the
caller asked to convert.
"""


class GroupConfError(Exception):
    """Base class for every error raised by groupconf."""
    pass


# ── Text source ──────────────────────────────────────────────────────


class ConfigReadError(GroupConfError):
    """Raised when a configuration file cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ConfigFileNotFoundError(ConfigReadError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path):
        super().__init__(path, "file not found")


# ── Parsing ──────────────────────────────────────────────────────────


class ParseError(GroupConfError):
    """Fatal parse failure tied to a single source line."""

    def __init__(self, message: str, line_number: int, raw_text: str):
        self.line_number = line_number
        self.raw_text = raw_text
        self.message = message
        super().__init__(f"line {line_number}: {message}: {raw_text!r}")


class MalformedLineError(ParseError):
    """Line is neither a comment, a group header nor a key/value pair."""

    def __init__(self, line_number: int, raw_text: str, message: str = "invalid syntax"):
        super().__init__(message, line_number, raw_text)


class ValueOutsideGroupError(ParseError):
    """Key/value pair appears before the first group header."""

    def __init__(self, line_number: int, raw_text: str):
        super().__init__("value outside any group", line_number, raw_text)


class StrictnessViolationError(ParseError):
    """Value breaks the active string strictness under the PANIC behavior."""

    def __init__(self, line_number: int, raw_text: str, strictness):
        self.strictness = strictness
        super().__init__(
            f"value not allowed with {strictness.value} string strictness",
            line_number,
            raw_text,
        )


# ── Type casts ───────────────────────────────────────────────────────


class CastError(GroupConfError, ValueError):
    """Raised when a stored value cannot be converted to the requested type."""

    def __init__(self, target_type: str, value: str, reason: str = ""):
        self.target_type = target_type
        self.value = value
        message = f"cannot convert {value!r} to {target_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidBoolValue(CastError):
    """Value is not one of the recognised boolean tokens."""

    def __init__(self, value: str):
        super().__init__("bool", value, "expected one of 1/0, true/false, on/off, yes/no")
