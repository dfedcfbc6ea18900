"""Test match rendering."""

import json

import pytest
import yaml
from rich.console import Console

from kubefind.core.formatter import build_matches_table, format_matches, print_matches
from kubefind.model.search import ReportFormat, SearchMatch


@pytest.fixture
def matches():
    return [
        SearchMatch(
            kind="ConfigMaps",
            name="settings",
            namespace="prod",
            match_start=12,
            match_end=20,
            start=2,
            end=30,
            snippet="url: [postgres]://db",
        )
    ]


def _console():
    return Console(record=True, width=200, force_terminal=False)


class TestFormatMatches:
    def test_json(self, matches):
        data = json.loads(format_matches(matches, ReportFormat.JSON))

        assert data == [matches[0].model_dump()]

    def test_yaml(self, matches):
        data = yaml.safe_load(format_matches(matches, ReportFormat.YAML))

        assert data[0]["snippet"] == "url: [postgres]://db"
        assert list(data[0]) == list(SearchMatch.model_fields)

    def test_empty_json(self):
        assert json.loads(format_matches([], ReportFormat.JSON)) == []

    def test_table_format_is_not_a_document(self, matches):
        with pytest.raises(ValueError):
            format_matches(matches, ReportFormat.TABLE)


class TestPrintMatches:
    def test_log_format_prints_nothing(self, matches):
        console = _console()

        print_matches(matches, ReportFormat.LOG, console)

        assert console.export_text() == ""

    def test_table_keeps_brackets(self, matches):
        console = _console()

        print_matches(matches, ReportFormat.TABLE, console)

        output = console.export_text()
        assert "[postgres]" in output
        assert "settings" in output

    def test_empty_table(self):
        console = _console()

        print_matches([], ReportFormat.TABLE, console)

        assert "No matches found" in console.export_text()

    def test_build_table_rows(self, matches):
        assert build_matches_table(matches).row_count == 1
