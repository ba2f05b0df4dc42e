"""
Error taxonomy for SOP Engineer.

Every error here is reported to the caller as a user-visible message.
Nothing is retried automatically and nothing is fatal to the process;
the user repeats the triggering action by hand.
"""


class SopEngineerError(Exception):
    """Base exception for all domain errors."""


class ValidationError(SopEngineerError):
    """Bad or missing required input (e.g. asset without a name)."""


class PreconditionError(SopEngineerError):
    """An operation was invoked without its required context."""


class ConfigurationError(SopEngineerError):
    """The generation credential is not configured."""


class UpstreamError(SopEngineerError):
    """The generation call failed or returned no usable text."""


class CorruptStateError(SopEngineerError):
    """Stored history could not be parsed."""


class GenerationInProgressError(SopEngineerError):
    """A generation is already running for this session."""
