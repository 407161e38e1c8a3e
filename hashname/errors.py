class HashNameError(Exception):
    """Base error for the project."""

class InvalidPatternError(HashNameError):
    pass

class SkipFile(HashNameError):
    """A single input is left alone; the message is the reason shown to the user."""
    reason = "Skipped"

    def __init__(self, reason: str | None = None):
        super().__init__(reason or self.reason)

class NotAFileError(SkipFile):
    reason = "Not a file"

class AlreadyProcessedError(SkipFile):
    reason = "Already processed"

class AlreadyExistsError(SkipFile):
    reason = "Already exists"

class PathEncodingError(SkipFile):
    reason = "Could not get string from path component"
