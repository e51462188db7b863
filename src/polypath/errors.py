# polypath/errors.py


class PolypathError(Exception):
    """Base class for every error raised by polypath."""


class InvalidInputError(PolypathError, ValueError):
    """Query inputs the engine refuses to search on (empty or unknown ids)."""


class EmptyQueueError(PolypathError, IndexError):
    pass


class PolyFormatError(PolypathError, ValueError):
    def __init__(self, msg: str, *, line_no: int | None = None):
        self.line_no = line_no
        super().__init__(f"line {line_no}: {msg}" if line_no is not None else msg)
