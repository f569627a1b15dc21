"""Tests for the CLI module."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

from artwork_selector.cli import app

from tests.fakes import FakeRecordSource, make_artworks


class TestCli:
    """Test cases for the CLI interface."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()
        self.source = FakeRecordSource(make_artworks(23))

    def _invoke(self, args):
        with patch("artwork_selector.cli.ArtworkAPIClient", return_value=self.source), \
             patch("artwork_selector.cli.setup_logging"):
            return self.runner.invoke(app, args)

    def test_browse(self):
        """browse prints the requested page and a summary line."""
        result = self._invoke(["browse", "--page", "2"])

        assert result.exit_code == 0
        assert "Artwork 11" in result.output
        assert "Artwork 20" in result.output
        assert "Page 2 of 3 (23 records) - 0 selected" in result.output
        assert self.source.closed

    def test_select_json(self):
        """select --json prints the run outcome as JSON."""
        result = self._invoke(["select", "15", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output.strip().splitlines()[-1])
        assert payload["selected_count"] == 15
        assert payload["pages_fetched"] == [2]
        assert payload["selected_ids"] == list(range(1, 16))
        assert payload["exhausted"] is False

    def test_select_reports_exhaustion(self):
        """select explains when the collection ran out."""
        result = self._invoke(["select", "30"])

        assert result.exit_code == 0
        assert "Selected 23 of 30 requested rows" in result.output
        assert "Collection exhausted" in result.output

    def test_select_fetch_failure(self):
        """A failing page fetch exits with code 1."""
        self.source.fail_on = {3}

        result = self._invoke(["select", "25"])

        assert result.exit_code == 1
        assert "Failed to fetch page 3" in result.output

    def test_browse_fetch_failure(self):
        """browse exits with code 1 when the page cannot be loaded."""
        self.source.fail_on = {1}

        result = self._invoke(["browse"])

        assert result.exit_code == 1
