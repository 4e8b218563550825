"""
Tests for BatchRunner.

Directory-to-directory analysis: results naming, isolation of failing
files and creation of a missing input directory.
"""

import json

import pytest

from edgy.analysis.domain.models import AnalysisResult
from edgy.batch.runner import PLACEHOLDER_NAME, BatchRunner, results_path_for


@pytest.fixture
def dirs(tmp_path):
    screens = tmp_path / "screens"
    screens.mkdir()
    return screens, tmp_path / "results"


class TestBatchRunner:
    """Test batch processing of screen exports."""

    def test_writes_results_per_file(self, analyzer, screen_export, dirs):
        screens_dir, results_dir = dirs
        (screens_dir / "checkout.json").write_text(json.dumps(screen_export), encoding="utf-8")

        outcomes = BatchRunner(analyzer, screens_dir, results_dir).run()

        assert [o.succeeded for o in outcomes] == [True]
        output = results_dir / "checkout-results.json"
        assert outcomes[0].output == output
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["totalIssues"] == 7
        assert AnalysisResult.from_json(payload) == outcomes[0].result

    def test_invalid_file_is_isolated(self, analyzer, screen_export, dirs):
        screens_dir, results_dir = dirs
        (screens_dir / "a-broken.json").write_text("{ nope", encoding="utf-8")
        (screens_dir / "b-checkout.json").write_text(json.dumps(screen_export), encoding="utf-8")

        outcomes = BatchRunner(analyzer, screens_dir, results_dir).run()

        broken, checkout = outcomes
        assert not broken.succeeded
        assert "Invalid JSON" in broken.error
        assert broken.output is None
        assert checkout.succeeded
        assert sorted(p.name for p in results_dir.iterdir()) == ["b-checkout-results.json"]

    def test_skips_own_results_when_writing_in_place(self, analyzer, screen_export, dirs):
        screens_dir, _ = dirs
        (screens_dir / "checkout.json").write_text(json.dumps(screen_export), encoding="utf-8")
        (screens_dir / "old-results.json").write_text("{}", encoding="utf-8")
        (screens_dir / "notes.txt").write_text("not a screen", encoding="utf-8")

        runner = BatchRunner(analyzer, screens_dir, screens_dir)

        assert [p.name for p in runner.discover()] == ["checkout.json"]

    def test_results_named_inputs_are_analyzed_elsewhere(self, analyzer, screen_export, dirs):
        screens_dir, results_dir = dirs
        (screens_dir / "checkout.json").write_text(json.dumps(screen_export), encoding="utf-8")
        (screens_dir / "survey-results.json").write_text(json.dumps(screen_export), encoding="utf-8")

        runner = BatchRunner(analyzer, screens_dir, results_dir)

        assert [p.name for p in runner.discover()] == ["checkout.json", "survey-results.json"]

    def test_malformed_node_name_is_isolated(self, analyzer, screen_export, dirs):
        screens_dir, results_dir = dirs
        bad = {"screens": [{"id": "1", "name": "Login", "children": [{"id": "2", "name": 42}]}]}
        (screens_dir / "a-bad.json").write_text(json.dumps(bad), encoding="utf-8")
        (screens_dir / "b-good.json").write_text(json.dumps(screen_export), encoding="utf-8")

        bad_outcome, good_outcome = BatchRunner(analyzer, screens_dir, results_dir).run()

        assert not bad_outcome.succeeded
        assert "'name' must be a string" in bad_outcome.error
        assert good_outcome.succeeded
        assert sorted(p.name for p in results_dir.iterdir()) == ["b-good-results.json"]

    def test_unhashable_target_is_isolated(self, analyzer, screen_export, dirs):
        screens_dir, results_dir = dirs
        bad = [{"id": "1", "name": "Login", "connections": [{"targetFrameId": ["2"]}]}]
        (screens_dir / "a-bad.json").write_text(json.dumps(bad), encoding="utf-8")
        (screens_dir / "b-good.json").write_text(json.dumps(screen_export), encoding="utf-8")

        outcomes = BatchRunner(analyzer, screens_dir, results_dir).run()

        assert [o.succeeded for o in outcomes] == [False, True]

    def test_empty_input_dir(self, analyzer, dirs):
        screens_dir, results_dir = dirs

        assert BatchRunner(analyzer, screens_dir, results_dir).run() == []
        assert not results_dir.exists()

    def test_missing_input_dir_is_created(self, analyzer, tmp_path):
        screens_dir = tmp_path / "screens"

        outcomes = BatchRunner(analyzer, screens_dir, tmp_path / "results").run()

        assert outcomes == []
        assert (screens_dir / PLACEHOLDER_NAME).is_file()

    def test_results_path_for(self, tmp_path):
        assert results_path_for(tmp_path / "screens" / "login.json", tmp_path / "out") == (
            tmp_path / "out" / "login-results.json"
        )
