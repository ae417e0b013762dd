# src/sprig/errors.py


class SprigError(Exception):
    """Base class for errors raised by the sprig package."""


class SprigSyntaxError(SprigError):
    """Source text produced parser diagnostics.

    ``errors`` holds the diagnostics in the order they were recorded.
    """

    def __init__(self, errors, filename="<stdin>"):
        self.errors = list(errors)
        self.filename = filename
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        details = "; ".join(self.errors)
        super().__init__(f"{filename}: {count} syntax {noun}: {details}")
