# analysis/exceptions.py
"""Custom exceptions for the speech analysis engine."""


class AnalysisError(Exception):
    """Base exception for analysis failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidWordTimingsError(AnalysisError):
    """Raised in strict mode when word timings are not chronological."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(
            f"Word timings violate ordering ({len(self.problems)} problem(s)): "
            + "; ".join(self.problems[:3])
        )
