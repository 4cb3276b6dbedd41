"""Error types for ReviewDigest."""


class ReviewDigestError(Exception):
    """Base class for all ReviewDigest errors."""


class ConfigurationAbsent(ReviewDigestError):
    """No usable API credential; the AI narrative is unavailable."""


class InvalidReview(ReviewDigestError, ValueError):
    """A raw record that cannot be turned into a Review."""


class NarrativeError(ReviewDigestError):
    """A narrative strategy failed; the next strategy should be tried."""


class NoEligibleEvidence(NarrativeError):
    """No comment is long enough to be quoted in the AI prompt."""


class ExternalServiceFailure(NarrativeError):
    """The text-generation service errored or timed out."""

    def __init__(self, message: str, reason: str = "api_error"):
        super().__init__(message)
        self.reason = reason


class DegenerateOutput(NarrativeError):
    """The service answered, but with text too short to use."""
