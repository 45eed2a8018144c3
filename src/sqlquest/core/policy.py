"""Difficulty policy table consumed by the challenge generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Tuple

from .models import Difficulty

# SQL feature vocabulary used by the policy table.
FILTER = "filter"
ORDER = "order"
LIMIT = "limit"
PROJECTION = "projection"
AGGREGATION = "aggregation"
GROUP_BY = "group_by"
JOIN = "join"
MULTI_JOIN = "multi_join"
SUBQUERY = "subquery"
CORRELATED_SUBQUERY = "correlated_subquery"
WINDOW_FUNCTION = "window_function"
CTE = "cte"

ALL_FEATURES: FrozenSet[str] = frozenset(
    {
        FILTER,
        ORDER,
        LIMIT,
        PROJECTION,
        AGGREGATION,
        GROUP_BY,
        JOIN,
        MULTI_JOIN,
        SUBQUERY,
        CORRELATED_SUBQUERY,
        WINDOW_FUNCTION,
        CTE,
    }
)


@dataclass(frozen=True)
class DifficultyPolicy:
    """Bounds on the SQL a challenge at one tier may require."""

    difficulty: Difficulty
    allowed_features: FrozenSet[str]
    required_any: FrozenSet[str]
    point_range: Tuple[int, int]
    rules: Tuple[str, ...]
    goal: str
    generic_hints: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def forbidden_features(self) -> FrozenSet[str]:
        return ALL_FEATURES - self.allowed_features

    def clamp_points(self, points: int) -> int:
        low, high = self.point_range
        return max(low, min(high, points))

    def render(self) -> str:
        """Render the constraint block embedded in generation prompts."""
        lines = [f"STRICT CONSTRAINT: {self.difficulty.value.upper()} LEVEL."]
        lines.extend(f"- {rule}" for rule in self.rules)
        lines.append(f"- Goal: {self.goal}")
        lines.append(
            "- Allowed SQL features: " + ", ".join(sorted(self.allowed_features))
        )
        if self.forbidden_features:
            lines.append(
                "- Forbidden SQL features: "
                + ", ".join(sorted(self.forbidden_features))
            )
        if self.required_any:
            lines.append(
                "- Must use at least one of: " + ", ".join(sorted(self.required_any))
            )
        lines.append(
            f"- Points must be between {self.point_range[0]} and {self.point_range[1]}."
        )
        return "\n".join(lines)


DIFFICULTY_POLICIES: Dict[Difficulty, DifficultyPolicy] = {
    Difficulty.BEGINNER: DifficultyPolicy(
        difficulty=Difficulty.BEGINNER,
        allowed_features=frozenset({PROJECTION, FILTER, ORDER, LIMIT}),
        required_any=frozenset({FILTER, ORDER, LIMIT}),
        point_range=(50, 150),
        rules=(
            "Use exactly one table.",
            "ABSOLUTELY NO JOINs.",
            "ABSOLUTELY NO GROUP BY or aggregate functions (COUNT, SUM, AVG).",
            "ABSOLUTELY NO SUBQUERIES.",
            "Task MUST be solvable with: SELECT [columns] FROM [table] "
            "WHERE [simple_condition] ORDER BY [column] LIMIT [n].",
        ),
        goal='Simple retrieval, e.g. "Find trips where fare is > 50".',
        generic_hints=(
            "Look at which columns describe what the question asks for.",
            "You only need SELECT, FROM, WHERE, ORDER BY and LIMIT.",
            "Try SELECT * FROM <table> WHERE <column> > <value> LIMIT 10.",
        ),
    ),
    Difficulty.INTERMEDIATE: DifficultyPolicy(
        difficulty=Difficulty.INTERMEDIATE,
        allowed_features=frozenset(
            {PROJECTION, FILTER, ORDER, LIMIT, AGGREGATION, GROUP_BY, JOIN}
        ),
        required_any=frozenset({GROUP_BY, JOIN}),
        point_range=(150, 300),
        rules=(
            "MUST use aggregation (COUNT, SUM, AVG, MIN, MAX) with GROUP BY,",
            "OR an INNER/LEFT JOIN between two tables.",
        ),
        goal="Reporting and summarization.",
        generic_hints=(
            "Decide which column the report is grouped by.",
            "Combine an aggregate function with GROUP BY, or JOIN the two tables.",
            "Try SELECT <column>, COUNT(*) FROM <table> GROUP BY <column>.",
        ),
    ),
    Difficulty.ADVANCED: DifficultyPolicy(
        difficulty=Difficulty.ADVANCED,
        allowed_features=ALL_FEATURES,
        required_any=frozenset(
            {WINDOW_FUNCTION, CTE, MULTI_JOIN, CORRELATED_SUBQUERY}
        ),
        point_range=(300, 500),
        rules=(
            "MUST use window functions (ROW_NUMBER, LEAD, LAG) OR CTEs (WITH clause),",
            "OR complex multi-joins (3+ tables),",
            "OR correlated subqueries in WHERE or HAVING.",
        ),
        goal="Complex analytical reasoning or cleaning.",
        generic_hints=(
            "Break the question into intermediate result sets.",
            "A CTE or a window function keeps each step readable.",
            "Try WITH ranked AS (SELECT ..., ROW_NUMBER() OVER (PARTITION BY ...)) ...",
        ),
    ),
}


def policy_for(difficulty: Difficulty) -> DifficultyPolicy:
    return DIFFICULTY_POLICIES[Difficulty(difficulty)]


def policy_summary() -> List[Dict[str, object]]:
    """Tabular view of the policy table, e.g. for an API listing."""
    return [
        {
            "difficulty": p.difficulty.value,
            "allowed_features": sorted(p.allowed_features),
            "required_any": sorted(p.required_any),
            "point_range": list(p.point_range),
        }
        for p in DIFFICULTY_POLICIES.values()
    ]
