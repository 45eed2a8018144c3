"""Tests for the mutating-keyword safety gate."""

import pytest

from sqlquest.core.safety import BLOCKED_MESSAGE, DENIED_KEYWORDS, SafetyFilter


@pytest.mark.parametrize("keyword", DENIED_KEYWORDS)
def test_every_denied_keyword_blocks(keyword):
    verdict = SafetyFilter().check(f"{keyword} something FROM trips")
    assert verdict.blocked is True
    assert verdict.reason == BLOCKED_MESSAGE
    assert verdict.matched_keywords == [keyword]


def test_drop_table_is_blocked():
    assert SafetyFilter().check("DROP TABLE trips").blocked is True


def test_match_is_case_insensitive():
    assert SafetyFilter().check("drop table trips").blocked is True
    assert SafetyFilter().check("Delete From trips").blocked is True


def test_keyword_anywhere_in_text_blocks():
    verdict = SafetyFilter().check("SELECT * FROM trips; DELETE FROM trips")
    assert verdict.blocked is True
    assert verdict.matched_keywords == ["DELETE"]


def test_substring_identifiers_do_not_block():
    f = SafetyFilter()
    assert f.check("SELECT created_at FROM trips").blocked is False
    assert f.check("SELECT updated_by, deleted_flag FROM audit").blocked is False
    assert f.check("SELECT dropoff_datetime FROM trips").blocked is False
    assert f.check("SELECT * FROM executed_jobs").blocked is False


def test_plain_select_passes():
    verdict = SafetyFilter().check("SELECT * FROM trips WHERE fare_amount > 50")
    assert verdict.blocked is False
    assert verdict.reason is None
    assert verdict.matched_keywords == []


def test_keyword_inside_string_literal_still_blocks():
    # Lexical gate: no knowledge of literals.
    assert SafetyFilter().check("SELECT * FROM logs WHERE msg = 'drop'").blocked is True


def test_multiple_keywords_reported_once_each():
    verdict = SafetyFilter().check("DROP TABLE a; drop table b; CREATE TABLE c (x INT)")
    assert verdict.matched_keywords == ["DROP", "CREATE"]


def test_custom_deny_list():
    f = SafetyFilter(denied_keywords=["merge"])
    assert f.check("MERGE INTO t USING s ON 1=1").blocked is True
    assert f.check("DROP TABLE t").blocked is False


def test_empty_query_is_not_blocked():
    assert SafetyFilter().check("").blocked is False
