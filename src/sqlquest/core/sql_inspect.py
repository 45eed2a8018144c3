"""Small lexical helpers over user SQL, built on sqlparse."""

from __future__ import annotations

from typing import List, Optional

import sqlparse
from sqlparse import sql as sql_nodes
from sqlparse import tokens as T

_SET_OPERATORS = {"UNION", "INTERSECT", "EXCEPT"}


def _integer_value(token: sqlparse.sql.Token) -> Optional[int]:
    if token.ttype in T.Literal.Number.Integer:
        return int(token.value)
    # MySQL style "LIMIT offset, count" groups into an identifier list.
    if isinstance(token, sql_nodes.IdentifierList):
        integers = [
            t for t in token.flatten() if t.ttype in T.Literal.Number.Integer
        ]
        if integers:
            return int(integers[-1].value)
    return None


def _statements(query: str) -> List[sql_nodes.Statement]:
    return [s for s in sqlparse.parse(query or "") if str(s).strip()]


def _significant(node: sql_nodes.TokenList) -> List[sql_nodes.Token]:
    return [t for t in node.tokens if not t.is_whitespace]


def _own_limit(tokens: List[sql_nodes.Token]) -> Optional[int]:
    for index, token in enumerate(tokens):
        if token.ttype in T.Keyword and token.normalized == "LIMIT":
            if index + 1 < len(tokens):
                return _integer_value(tokens[index + 1])
            return None
    return None


def _sole_derived_table(
    tokens: List[sql_nodes.Token],
) -> Optional[sql_nodes.Parenthesis]:
    """Return the subquery when it is the only row source of a SELECT."""
    for token in tokens:
        if token.ttype in T.Keyword and (
            "JOIN" in token.normalized
            or token.normalized.split()[0] in _SET_OPERATORS
        ):
            return None

    for index, token in enumerate(tokens):
        if token.ttype in T.Keyword and token.normalized == "FROM":
            if index + 1 >= len(tokens):
                return None
            source = tokens[index + 1]
            # "(SELECT ...) t" and "(SELECT ...) AS t" group into an identifier.
            if isinstance(source, sql_nodes.Identifier):
                source = source.token_first(skip_ws=True, skip_cm=True)
            if isinstance(source, sql_nodes.Parenthesis) and any(
                t.ttype in T.Keyword.DML for t in source.tokens
            ):
                return source
            return None
    return None


def _row_cap(node: sql_nodes.TokenList) -> Optional[int]:
    tokens = _significant(node)
    caps = [_own_limit(tokens)]
    derived = _sole_derived_table(tokens)
    if derived is not None:
        caps.append(_row_cap(derived))
    caps = [c for c in caps if c is not None]
    return min(caps) if caps else None


def explicit_limit(query: str) -> Optional[int]:
    """Return the most rows the query's result can hold, from its ``LIMIT``.

    The result of a script is the result of its last statement, so only
    that statement is inspected. Its own ``LIMIT n`` counts, and so does
    the ``LIMIT`` of a derived table that is its only row source (no joins,
    no set operators). Limits inside ``WHERE`` subqueries, joined derived
    tables or CTE bodies do not bound the result and are ignored.
    """
    statements = _statements(query)
    if not statements:
        return None
    return _row_cap(statements[-1])


def statement_count(query: str) -> int:
    return len([s for s in sqlparse.split(query or "") if s.strip()])
