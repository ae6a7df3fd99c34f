"""Tests for human-readable filename synthesis."""

from maid.models import DocumentKind
from maid.naming import extract_title, normalize_name, synthesize_filename, title_case


class TestNormalizeAndExtract:
    def test_normalize_replaces_separators(self):
        assert normalize_name("FINAL_test-Results") == "final test results"

    def test_install_pattern_captures_remainder(self):
        assert extract_title("install deps") == "Install deps"

    def test_setup_maps_to_install(self):
        assert extract_title("setup database") == "Install database"

    def test_last_matching_pattern_wins(self):
        """setup and deploy both match; deploy comes later in the list."""
        assert extract_title("setup and deploy server") == "Deploy server"

    def test_configuration_long_form(self):
        assert extract_title("app configuration") == "Configuration "

    def test_keyword_inside_word_matches(self):
        """Patterns search anywhere in the name, not only at the start."""
        assert extract_title("latest notes") == "Test notes"

    def test_no_match_keeps_normalized_name(self):
        assert extract_title("user guide v1") == "user guide v1"


class TestTitleCase:
    def test_first_letter_only(self):
        assert title_case("hELLO wORLD") == "HELLO WORLD"

    def test_collapses_whitespace(self):
        assert title_case("  install   deps ") == "Install Deps"

    def test_idempotent(self):
        once = title_case("deploy the big server")
        assert title_case(once) == once


class TestSynthesizeFilename:
    def test_install_deps_script(self, make_record):
        record = make_record("install_deps.sh", "# installs project dependencies")
        assert record.document_kind == DocumentKind.SCRIPT
        assert synthesize_filename(record) == "Install Deps.sh"

    def test_cascading_script_name(self, make_record):
        record = make_record("setup_and_deploy_server.sh", "echo deploying")
        assert synthesize_filename(record) == "Deploy Server.sh"

    def test_hyphenated_build_script(self, make_record):
        record = make_record("run-build-fast.sh", "make")
        assert synthesize_filename(record) == "Build Fast.sh"

    def test_report_prefix(self, make_record):
        record = make_record("STATUS_REPORT_Q2.md", "Project is on track")
        assert synthesize_filename(record) == "Report - Status Report Q2.md"

    def test_guide_prefix(self, make_record):
        record = make_record("USER_GUIDE_V1.md", "")
        assert synthesize_filename(record) == "Guide - User Guide V1.md"

    def test_summary_prefix(self, make_record):
        record = make_record("DOCUMENTATION_REFACTORING_SUMMARY.md", "")
        assert synthesize_filename(record) == "Summary - Documentation Refactoring Summary.md"

    def test_rubric_prefix(self, make_record):
        record = make_record("IMPLEMENTATION_RUBRIC.md", "")
        assert synthesize_filename(record) == "Rubric - Implementation Rubric.md"

    def test_unknown_markdown_has_no_prefix(self, make_record):
        record = make_record("app_configuration.md", "hello world")
        assert record.document_kind == DocumentKind.UNKNOWN
        assert synthesize_filename(record) == "Configuration.md"

    def test_other_file_type_keeps_name(self, make_record):
        record = make_record("notes.txt", "hello")
        assert synthesize_filename(record) == "notes.txt"
