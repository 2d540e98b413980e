# tests/test_spell_checker.py
import unittest
from unittest.mock import patch

import pytest

from spellcheck_assistant.core.bktree import Suggestion
from spellcheck_assistant.core.spell_checker import (
    CursorContext,
    DictionaryUnavailable,
    QueryStatus,
    ServiceState,
    SpellCheckService,
)

BASIC = ["the", "quick", "brown", "fox"]


@pytest.fixture
def service():
    s = SpellCheckService()
    assert s.load_dictionary(BASIC) is ServiceState.READY
    return s


def _failing_words():
    yield "the"
    raise IOError("connection reset while fetching dictionary")


# end-to-end ----------------------------------------------------------------
def test_end_to_end_scenario(service):
    text = "teh quikc fox"
    ctx = service.analyze_cursor_context(text, 3, 2)
    assert ctx.current_token == "teh"
    assert ctx.is_known is False
    assert ctx.suggestions[0] == Suggestion("the", 2)

    unknown = service.find_unknown_tokens(text)
    assert unknown.available
    assert sorted(unknown) == ["quikc", "teh"]
    assert "fox" not in unknown


def test_unknown_token_uses_default_tolerance(service):
    service.set_tolerance(1)
    assert service.analyze_cursor_context("teh", 3).suggestions == ()
    service.set_tolerance(2)
    assert service.analyze_cursor_context("teh", 3).suggestions == (Suggestion("the", 2),)


def test_known_token_shows_near_neighbours_without_itself():
    s = SpellCheckService()
    s.load_dictionary(["the", "tea", "tha", "thy", "then", "quick"])
    ctx = s.analyze_cursor_context("I said the", 10, tolerance=3)
    assert ctx.is_known is True
    assert [x.word for x in ctx.suggestions] == ["tha", "then", "thy"]
    assert all(x.distance == 1 for x in ctx.suggestions)


def test_neighbor_radius_is_configurable():
    s = SpellCheckService(neighbor_radius=0)
    s.load_dictionary(["the", "tea"])
    assert s.analyze_cursor_context("the", 3).suggestions == ()


def test_short_and_empty_tokens_are_not_flagged(service):
    ctx = service.analyze_cursor_context("an", 2)
    assert ctx == CursorContext(current_token="an", is_known=True)
    ctx = service.analyze_cursor_context("teh ", 4)
    assert ctx.current_token == "" and ctx.is_known and ctx.suggestions == ()
    assert service.analyze_cursor_context("", 0).is_known


def test_cursor_token_is_case_folded(service):
    ctx = service.analyze_cursor_context("The QUICK", 9)
    assert ctx.current_token == "quick"
    assert ctx.is_known


def test_negative_tolerance_yields_empty_suggestions(service):
    ctx = service.analyze_cursor_context("teh", 3, tolerance=-1)
    assert ctx.is_known is False
    assert ctx.suggestions == ()
    assert service.suggest("teh", -3) == []


def test_find_unknown_dedupes_and_filters(service):
    out = service.find_unknown_tokens("Teh teh TEH fox an xq brwn")
    assert out.tokens == ("teh", "brwn")
    assert service.find_unknown_tokens("").tokens == ()


def test_find_unknown_is_deterministic(service):
    text = "zzy qwe the abcde qwe fox mmm"
    assert service.find_unknown_tokens(text) == service.find_unknown_tokens(text)


def test_dictionary_is_normalized_once():
    s = SpellCheckService()
    s.load_dictionary(["  The ", "QUICK", "", "the", "\tBrown\n"])
    assert s.is_known("the") and s.is_known("Quick") and s.is_known("brown")
    assert s.stats()["words"] == 3
    assert s.stats()["nodes"] == 3
    assert s.vocabulary() == ["the", "quick", "brown"]


def test_empty_dictionary_flags_everything_without_suggestions():
    s = SpellCheckService()
    assert s.load_dictionary([]) is ServiceState.READY
    ctx = s.analyze_cursor_context("hello", 5)
    assert ctx.is_known is False and ctx.suggestions == ()
    assert s.find_unknown_tokens("hello world").tokens == ("hello", "world")


# lifecycle ------------------------------------------------------------------
def test_loading_state_returns_defined_empty_results():
    s = SpellCheckService()
    assert s.state is ServiceState.LOADING
    ctx = s.analyze_cursor_context("teh", 3)
    assert ctx.status is QueryStatus.LOADING and not ctx.available
    assert ctx.suggestions == () and ctx.is_known
    assert s.find_unknown_tokens("teh").status is QueryStatus.LOADING
    assert s.is_known("the") is False
    s.require_ready()  # only a failed load raises


def test_failed_load_reports_unavailable():
    s = SpellCheckService()
    assert s.load_dictionary(_failing_words()) is ServiceState.FAILED
    assert "connection reset" in s.failure_reason
    ctx = s.analyze_cursor_context("teh", 3)
    assert ctx.status is QueryStatus.UNAVAILABLE
    unknown = s.find_unknown_tokens("teh quikc")
    assert unknown.status is QueryStatus.UNAVAILABLE and unknown.tokens == ()
    with pytest.raises(DictionaryUnavailable):
        s.require_ready()


def test_failed_is_terminal():
    s = SpellCheckService()
    s.mark_failed("fetch timed out")
    assert s.load_dictionary(BASIC) is ServiceState.FAILED
    assert s.analyze_cursor_context("the", 3).status is QueryStatus.UNAVAILABLE


def test_ready_ignores_reload(service):
    assert service.load_dictionary(["other"]) is ServiceState.READY
    assert service.is_known("fox") and not service.is_known("other")
    service.mark_failed("late failure")
    assert service.state is ServiceState.READY


def test_load_from_source_failure():
    def source():
        raise ValueError("bad dictionary payload")

    s = SpellCheckService()
    assert s.load_from_source(source) is ServiceState.FAILED
    assert "bad dictionary payload" in s.failure_reason


def test_load_word_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text("the\nquick\nbrown\nfox\n", encoding="utf-8")
    s = SpellCheckService()
    assert s.load_word_file(p) is ServiceState.READY
    assert s.is_known("brown")

    missing = SpellCheckService()
    assert missing.load_word_file(tmp_path / "missing.txt") is ServiceState.FAILED
    assert "DictionaryLoadError" in missing.failure_reason


# reports --------------------------------------------------------------------
class _Editor:
    def __init__(self, text, cursor):
        self.text, self.cursor = text, cursor

    def get_text(self):
        return self.text

    def get_cursor_offset(self):
        return self.cursor


def test_update_builds_report_and_reset_clears(service):
    report = service.update_from(_Editor("teh quikc fox", 3))
    assert report.status is QueryStatus.OK
    assert report.error_count == 2
    assert report.context.current_token == "teh"
    assert service.last_report is report
    service.reset()
    assert service.last_report is None


def test_results_are_plain_data(service):
    ctx = service.analyze_cursor_context("teh", 3)
    assert ctx.as_dict() == {
        "current_token": "teh",
        "is_known": False,
        "suggestions": [{"word": "the", "distance": 2}],
        "status": "ok",
    }
    assert service.find_unknown_tokens("teh").as_dict() == {"tokens": ["teh"], "status": "ok"}
    with pytest.raises(Exception):
        ctx.is_known = True  # frozen


def test_max_suggestions_cap():
    s = SpellCheckService(max_suggestions=2)
    s.load_dictionary(["tea", "ten", "tee", "toe"])
    assert len(s.analyze_cursor_context("tez", 3, 1).suggestions) == 2


def test_suggest_limit_defaults_to_max_suggestions():
    s = SpellCheckService(max_suggestions=2)
    s.load_dictionary(["tea", "ten", "tee", "toe"])
    assert s.suggest("tez", 1) == [Suggestion("tea", 1), Suggestion("tee", 1)]
    assert len(s.suggest("tez", 1, limit=5)) == 3


class SpellCheckServiceIndexTests(unittest.TestCase):
    @patch("spellcheck_assistant.core.spell_checker.BKTree")
    def test_index_queried_with_expected_tolerances(self, MockBK):
        mock_tree = MockBK.return_value
        mock_tree.depth.return_value = 1
        mock_tree.search.return_value = [Suggestion("the", 0), Suggestion("tea", 1)]

        s = SpellCheckService(tolerance=2)
        s.load_dictionary(["The", "tea"])
        mock_tree.insert_many.assert_called_once_with(["the", "tea"])

        s.analyze_cursor_context("teh", 3)
        mock_tree.search.assert_called_with("teh", 2, limit=20)

        ctx = s.analyze_cursor_context("the", 3)
        mock_tree.search.assert_called_with("the", 1, limit=20)
        self.assertEqual(ctx.suggestions, (Suggestion("tea", 1),))

    @patch("spellcheck_assistant.core.spell_checker.BKTree")
    def test_short_tokens_never_hit_the_index(self, MockBK):
        s = SpellCheckService()
        s.load_dictionary(["the"])
        s.analyze_cursor_context("to", 2)
        MockBK.return_value.search.assert_not_called()


if __name__ == "__main__":
    unittest.main()
