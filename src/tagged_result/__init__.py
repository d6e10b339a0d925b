"""A tagged success-or-failure value type."""

from tagged_result.exceptions import ConfigError, ResultError, TaggedResultException
from tagged_result.result import Result

__all__ = ["ConfigError", "Result", "ResultError", "TaggedResultException"]
