"""
Query Simulator: a generation service standing in for a query engine.

The service judges the query against the schema and fabricates a plausible
result set with cost figures. Everything the result promises is enforced
locally after the call:

  - an engine-reported error clears every row and estimate
  - a ``LIMIT n`` bounding the result (see :func:`explicit_limit`) caps
    the returned rows at ``n``
  - ``total_row_count`` is at least the number of returned rows
  - ``cost_estimate`` is ``bytes_processed * cost_per_byte``, never taken
    from the service
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlquest.capabilities.datasets import SchemaDescriptor
from sqlquest.capabilities.text_generation import (
    GenerationOk,
    GenerationTransportError,
    TextGenerationService,
    request_structured,
)
from sqlquest.config import QuestSettings
from sqlquest.core.models import QueryResult
from sqlquest.core.sql_inspect import explicit_limit, statement_count

logger = logging.getLogger(__name__)

ENGINE_ERROR_PREFIX = "Engine Simulation Error: "

EXECUTION_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "error": {"type": ["string", "null"]},
        "columns": {"type": "array", "items": {"type": "string"}},
        "rows": {"type": "array", "items": {"type": "object"}},
        "totalRowCount": {"type": ["integer", "null"]},
        "bytesProcessed": {"type": ["integer", "null"]},
        "durationMs": {"type": ["integer", "null"]},
    },
}


class QuerySimulator:
    """Runs safety-cleared SQL against a schema through a mock engine."""

    def __init__(
        self,
        llm_service: TextGenerationService,
        *,
        settings: Optional[QuestSettings] = None,
    ) -> None:
        self.llm_service = llm_service
        self.settings = settings or QuestSettings()

    def estimate_cost(self, bytes_processed: int) -> float:
        return bytes_processed * self.settings.cost_per_byte

    async def run(self, query: str, dataset: SchemaDescriptor) -> QueryResult:
        """Simulate ``query`` against ``dataset``.

        The query must already have passed the safety filter. Service
        failures come back as an error result, never as an exception.
        """
        limit = explicit_limit(query)
        prompt = self.build_prompt(query, dataset, limit)

        outcome = await request_structured(
            self.llm_service,
            prompt,
            response_schema=EXECUTION_RESPONSE_SCHEMA,
            timeout=self.settings.llm_timeout_seconds,
        )

        if isinstance(outcome, GenerationTransportError):
            logger.error("Engine simulation transport failure: %s", outcome.message)
            return QueryResult.failure(ENGINE_ERROR_PREFIX + outcome.message)
        if not isinstance(outcome, GenerationOk):
            logger.error("Engine simulation returned unusable output: %s", outcome.message)
            return QueryResult.failure(ENGINE_ERROR_PREFIX + outcome.message)

        return self._to_result(outcome.data, limit)

    def build_prompt(
        self, query: str, dataset: SchemaDescriptor, limit: Optional[int] = None
    ) -> str:
        if limit is not None:
            row_instruction = f"Generate exactly {limit} rows, matching the query's LIMIT {limit}."
        else:
            row_instruction = (
                "If the query has a LIMIT N, generate at most N rows; otherwise "
                f"generate {self.settings.sample_row_count} rows of realistic "
                "sample data so the user can scroll."
            )

        script_note = ""
        statements = statement_count(query)
        if statements > 1:
            logger.debug("Simulating a %d-statement script", statements)
            script_note = (
                f"\nThe query is a script of {statements} statements; "
                "return the result of its last statement."
            )

        return f"""Act as a Google BigQuery SQL Engine.
Schema:
{dataset.render_inventory()}

User Query: {query}{script_note}

Instructions:
1. Analyze the query against the schema.
2. If the query is invalid (syntax error, unknown table or column names), return a JSON object with a single key "error" describing the issue.
3. If valid, return a JSON object with:
   - "columns": array of the column names the query projects, in order.
   - "rows": array of objects keyed by those column names. {row_instruction}
   - "totalRowCount": integer estimate of the rows this query would return against the full-scale dataset.
   - "bytesProcessed": integer estimate.
   - "durationMs": integer execution time estimate.

Data Generation:
- Create highly realistic values that match the declared column types and the nature of the dataset.
- Every row must satisfy the query's filters.
- Use null where appropriate.

Response MUST be raw JSON."""

    def _to_result(self, data: Dict[str, Any], limit: Optional[int]) -> QueryResult:
        error = data.get("error")
        if error:
            return QueryResult.failure(str(error))

        rows: List[Dict[str, Any]] = list(data.get("rows") or [])
        if limit is not None and len(rows) > limit:
            logger.debug("Truncating %d simulated rows to LIMIT %d", len(rows), limit)
            rows = rows[:limit]

        columns = list(data.get("columns") or [])
        if not columns and rows:
            columns = list(rows[0].keys())

        bytes_processed = data.get("bytesProcessed") or self.settings.default_bytes_processed
        duration_ms = data.get("durationMs") or self.settings.default_duration_ms
        total_row_count = max(data.get("totalRowCount") or len(rows), len(rows))

        return QueryResult(
            columns=columns,
            rows=rows,
            duration_ms=max(int(duration_ms), 0),
            bytes_processed=max(int(bytes_processed), 0),
            total_row_count=total_row_count,
            cost_estimate=self.estimate_cost(max(int(bytes_processed), 0)),
        )
