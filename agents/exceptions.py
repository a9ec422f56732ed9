"""
Error taxonomy for the evaluation pipeline.

ProfileFetchFailure never leaves the profile fetcher; every AnalysisError
subclass is fatal to the current evaluation and carries a message that can be
shown to the user as-is.
"""


class SynergyError(Exception):
    """Base exception for the partnership evaluator."""
    pass


class ProfileFetchFailure(SynergyError):
    """Profile lookup failed (status, transport or body). Degrades to no data."""
    pass


class AnalysisError(SynergyError):
    """Base exception for failures of the analysis call."""
    pass


class ConfigurationError(AnalysisError):
    """Required analysis credential is missing."""
    pass


class EmptyResponseError(AnalysisError):
    """The analysis call returned no text."""
    pass


class MalformedResponseError(AnalysisError):
    """The analysis reply was not valid JSON in the expected layout."""
    pass


class TransportError(AnalysisError):
    """Network or provider failure on the analysis call."""
    pass
