"""Exception hierarchy shared by the framer, the byte sources and config."""


class RadarError(Exception):
    """Base class for everything radarscope raises on purpose."""


class ConfigError(RadarError):
    pass


class SourceError(RadarError):
    """Byte source could not be opened or read.  Fatal to the process."""


class FramingError(RadarError):
    """Recoverable wire-level problem; the stream resumes at the next `|`."""


class ParseError(FramingError):
    def __init__(self, raw: bytes, reason: str) -> None:
        super().__init__(f"{reason}: {raw!r}")
        self.raw = raw
        self.reason = reason


class FrameOverflow(FramingError):
    """
    Residue after the last frame delimiter outgrew the configured cap.

    `messages` holds the complete frames extracted by the same feed call so
    the caller can still process them.
    """

    def __init__(self, size: int, limit: int, messages=()) -> None:
        super().__init__(f"{size} bytes without a frame delimiter (limit {limit})")
        self.size = size
        self.limit = limit
        self.messages = list(messages)
