# This project was developed with assistance from AI tools.
"""Error types raised at the input boundary."""


class InvalidInputError(ValueError):
    """Loan or timing input could not be parsed into a valid record.

    Raised by the CLI loaders; the evaluators themselves never raise for
    well-formed records and report domain problems as findings.
    """

    def __init__(self, message: str, *, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
