"""Stats subsystem exceptions."""


class StatsError(Exception):
    """Base class for bundle stats errors."""


class StatsFileError(StatsError):
    """Stats file is missing or is not readable JSON."""


class StatsValidationError(StatsError):
    """Stats payload does not have the expected shape."""
