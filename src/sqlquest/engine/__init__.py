"""Simulated query engine."""

from .simulator import ENGINE_ERROR_PREFIX, EXECUTION_RESPONSE_SCHEMA, QuerySimulator

__all__ = ["ENGINE_ERROR_PREFIX", "EXECUTION_RESPONSE_SCHEMA", "QuerySimulator"]
