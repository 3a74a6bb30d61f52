"""Stats file subsystem for BundleKit."""

from bundlepack.stats.exceptions import StatsError, StatsFileError, StatsValidationError
from bundlepack.stats.parser import parse_stats, read_stats_file
from bundlepack.stats.schema import STATS_SCHEMA, validate_stats

__all__ = [
    "StatsError",
    "StatsFileError",
    "StatsValidationError",
    "STATS_SCHEMA",
    "parse_stats",
    "read_stats_file",
    "validate_stats",
]
