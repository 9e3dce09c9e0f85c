"""
Error taxonomy for worst-case analysis runs.

Every error is terminal for the run. They subclass ValueError so callers
that only care about "bad input" can catch that.
"""


class WorstCaseError(ValueError):
    """Base class for all analysis failures."""


class ConfigurationError(WorstCaseError):
    """Input directory missing, not a directory, or holding no input files."""


class MalformedRecordError(WorstCaseError):
    """A data row could not be turned into a sample."""

    def __init__(self, source: str, row_number: int, detail: str) -> None:
        self.source = source
        self.row_number = row_number
        self.detail = detail
        super().__init__(f"{source}, row {row_number}: {detail}")


class InsufficientDataError(WorstCaseError):
    """One or more windows never saw a full run of samples."""

    def __init__(self, missing: list[tuple[str, int]], sample_count: int) -> None:
        self.missing = missing
        self.sample_count = sample_count
        windows = ", ".join(f"{metric} {hours}h" for metric, hours in missing)
        super().__init__(
            f"Insufficient data: {sample_count} sample(s) cannot fill window(s) {windows}."
        )
