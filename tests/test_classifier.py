"""Tests for the section state machine."""

from difftint.diff.classifier import classify, transition
from difftint.diff.models import Section


class TestTriggers:
    def test_diff_header(self):
        assert classify(Section.UNKNOWN, "diff --git a/x.rs b/x.rs") == Section.DIFF_META

    def test_commit(self):
        assert classify(Section.DIFF_HUNK, "commit 0123abc") == Section.COMMIT

    def test_hunk_header(self):
        assert classify(Section.DIFF_META, "@@ -1,1 +1,1 @@") == Section.DIFF_HUNK

    def test_combined_diff_header(self):
        assert classify(Section.COMMIT, "diff --cc merged.c") == Section.DIFF_META

    def test_transition_none_for_plain_lines(self):
        assert transition("index 111..222") is None
        assert transition("+let x = 2;") is None
        assert transition("") is None


class TestStability:
    def test_unknown_persists(self):
        assert classify(Section.UNKNOWN, "random text") == Section.UNKNOWN

    def test_meta_persists_until_hunk(self):
        section = Section.UNKNOWN
        for line in ("diff --git a/f b/f", "index 1..2", "--- a/f", "+++ b/f"):
            section = classify(section, line)
        assert section == Section.DIFF_META

    def test_hunk_persists_over_any_content(self):
        section = classify(Section.DIFF_META, "@@ -1 +1 @@")
        for line in ("-old", "+new", " context", "", "index 1..2", "\\ No newline at end of file"):
            section = classify(section, line)
            assert section == Section.DIFF_HUNK

    def test_hunk_ended_by_commit(self):
        section = classify(Section.DIFF_HUNK, "commit deadbeef")
        assert section == Section.COMMIT

    def test_content_starting_with_commit_is_taken_as_trigger(self):
        """Prefix matching cannot tell hunk content from a commit line."""
        assert classify(Section.DIFF_HUNK, "commitment = 1") == Section.COMMIT

    def test_indented_trigger_is_not_a_trigger(self):
        assert classify(Section.DIFF_HUNK, " commit inside context") == Section.DIFF_HUNK
