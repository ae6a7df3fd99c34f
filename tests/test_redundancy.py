"""Tests for the keep/discard redundancy policies."""

from datetime import datetime, timedelta
from pathlib import Path

from maid.models import DocumentKind
from maid.redundancy import group_by_kind, partition

DAY_1 = datetime(2025, 1, 1, 9, 0, 0)


def words(count: int) -> str:
    return " ".join(["word"] * count)


class TestRubricPolicy:
    def test_highest_word_count_kept(self, make_record):
        v1 = make_record("rubric_v1.md", "Evaluation Rubric " + words(198))
        v2 = make_record("rubric_v2.md", "Evaluation Rubric " + words(498))
        assert v1.document_kind == v2.document_kind == DocumentKind.RUBRIC

        result = partition([v1, v2])

        assert result.keep == [v2.path]
        assert result.discard == [v1.path]
        assert result.reasons[v2.path] == "most comprehensive rubric"

    def test_word_count_tie_keeps_first(self, make_record):
        a = make_record("a_rubric.md", words(10))
        b = make_record("b_rubric.md", words(10))
        result = partition([a, b])
        assert result.keep == [a.path]
        assert result.discard == [b.path]


class TestRecencyPolicies:
    def test_newest_report_kept(self, make_record):
        old = make_record("old_report.md", created_at=DAY_1)
        new = make_record("new_report.md", created_at=DAY_1 + timedelta(days=3))
        result = partition([old, new])
        assert result.keep == [new.path]
        assert result.discard == [old.path]

    def test_timestamp_beats_missing_timestamp(self, make_record):
        """A summary with no creation time counts as older than any timestamp."""
        undated = make_record("a.md", "# Summary\nfirst")
        dated = make_record("b.md", "# Summary\nsecond", created_at=DAY_1)
        assert undated.document_kind == DocumentKind.SUMMARY

        result = partition([undated, dated])

        assert result.keep == [dated.path]
        assert result.discard == [undated.path]

    def test_all_missing_timestamps_keep_first(self, make_record):
        first = make_record("one_summary.md")
        second = make_record("two_summary.md")
        result = partition([first, second])
        assert result.keep == [first.path]
        assert result.discard == [second.path]

    def test_aware_and_naive_timestamps_compare(self, make_record):
        from datetime import timezone

        naive = make_record("a_report.md", created_at=DAY_1)
        aware = make_record(
            "b_report.md", created_at=datetime(2030, 1, 1, tzinfo=timezone.utc)
        )
        result = partition([naive, aware])
        assert result.keep == [aware.path]


class TestKeepAllPolicies:
    def test_guides_always_kept(self, make_record):
        guides = [make_record(f"guide_{i}.md") for i in range(3)]
        result = partition(guides)
        assert result.keep == [g.path for g in guides]
        assert result.discard == []

    def test_unknown_kept(self, make_record):
        notes = [make_record("notes.md", "misc"), make_record("ideas.md", "misc")]
        result = partition(notes)
        assert set(result.keep) == {n.path for n in notes}
        assert result.discard == []

    def test_unreadable_kept_without_record(self, make_record):
        broken = Path("/work/broken.md")
        result = partition([], unreadable=[broken])
        assert result.keep == [broken]
        assert result.kept_records == []

    def test_unreadable_and_unknown_follow_scan_order(self, make_record):
        alpha = make_record("alpha.md", "misc")
        beta = Path("/work/beta.md")
        gamma = make_record("gamma.md", "misc")
        guide = make_record("guide.md")

        result = partition(
            [alpha, guide, gamma],
            unreadable=[beta],
            order=[alpha.path, beta, guide.path, gamma.path],
        )

        assert result.keep == [alpha.path, beta, gamma.path, guide.path]
        assert result.kept_records == [alpha, gamma, guide]


class TestScriptDeduplication:
    def test_first_occurrence_wins(self, make_record):
        a = make_record("a.sh", "echo hi\n")
        b = make_record("b.sh", "  echo hi  \n\n")
        c = make_record("c.sh", "echo hi")
        result = partition([a, b, c])
        assert result.keep == [a.path]
        assert result.discard == [b.path, c.path]
        assert result.reasons[b.path] == f"duplicate of {a.path}"

    def test_distinct_scripts_kept(self, make_record):
        a = make_record("a.sh", "echo one")
        b = make_record("b.sh", "echo two")
        c = make_record("c.sh", "echo two")
        result = partition([a, b, c])
        assert result.keep == [a.path, b.path]
        assert result.discard == [c.path]

    def test_inner_whitespace_is_significant(self, make_record):
        a = make_record("a.sh", "echo  hi")
        b = make_record("b.sh", "echo hi")
        result = partition([a, b])
        assert result.discard == []


class TestPartitionProperties:
    def _mixed(self, make_record):
        return [
            make_record("rubric_a.md", words(5)),
            make_record("rubric_b.md", words(50)),
            make_record("status_report.md"),
            make_record("weekly_report.md"),
            make_record("user_guide.md"),
            make_record("overview.md"),
            make_record("a.sh", "echo x"),
            make_record("b.sh", "echo x"),
            make_record("notes.md", "misc"),
        ]

    def test_keep_and_discard_cover_input_exactly(self, make_record):
        records = self._mixed(make_record)
        result = partition(records)

        inputs = {r.path for r in records}
        assert result.keep_set | result.discard_set == inputs
        assert result.keep_set & result.discard_set == set()
        assert len(result.keep) + len(result.discard) == len(records)

    def test_singleton_groups_fully_kept(self, make_record):
        records = [
            make_record("rubric.md"),
            make_record("status_report.md"),
            make_record("overview.md"),
            make_record("a.sh", "echo x"),
        ]
        result = partition(records)
        assert result.discard == []
        assert len(result.kept_records) == 4

    def test_group_by_kind_preserves_order(self, make_record):
        records = self._mixed(make_record)
        groups = group_by_kind(records)
        assert [r.base_name for r in groups[DocumentKind.RUBRIC]] == ["rubric_a", "rubric_b"]
        assert groups[DocumentKind.UNKNOWN][0].base_name == "notes"
