"""Error hierarchy shared by the analytical components and the CLI boundary."""


class StatsError(Exception):
    """Base class for every error raised by the statistics engine."""


class InsufficientDataError(StatsError):
    """Not enough samples for the requested computation (reported, not fatal)."""


class EmptyInputError(StatsError):
    """An operation that needs at least one value received none."""


class MalformedInputError(StatsError):
    """A value or row could not be parsed into the expected numeric shape."""


class ConfigurationError(StatsError):
    """A caller-supplied configuration value is invalid."""


class ConfigurationMismatchError(ConfigurationError):
    """Configuration does not line up with the data (e.g. base-rate count vs. class count)."""
