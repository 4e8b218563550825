"""
Tests for GitHub Actions Annotations generator.

Tests workflow command generation, annotation formatting, and output utilities.
"""

from unittest.mock import patch

import pytest

from edgy.analysis.domain.models import Issue
from edgy.analysis.infrastructure.screen_loader import parse_screens
from edgy.reports.github_annotations import GitHubAnnotations


def make_issue(severity="critical", name="Validation Error State", screen_name="Login Form", suggested=None):
    return Issue(
        id=f"edge-{severity}-1:1",
        pattern_id="form-submission",
        edge_case_id="form-validation-error",
        name=name,
        description="Show inline validation",
        severity=severity,
        suggested_components=["Alert", "Input (error)"] if suggested is None else suggested,
        screen_id="1:1",
        screen_name=screen_name,
    )


class TestIssueAnnotationGeneration:
    """Test individual issue annotation generation."""

    def test_critical_issue_annotation(self):
        """Test error annotation for critical issues."""
        annotation = GitHubAnnotations.generate_issue_annotation(make_issue(), "screens/login.json")

        assert annotation == (
            "::error file=screens/login.json,title=Validation Error State::"
            "[form-validation-error] 🔴 CRITICAL: Login Form is missing Validation Error State "
            "(suggested: Alert, Input (error))"
        )

    @pytest.mark.parametrize(
        "severity, level, prefix",
        [("warning", "warning", "🟡 WARNING"), ("info", "notice", "🔵 INFO")],
    )
    def test_severity_levels(self, severity, level, prefix):
        annotation = GitHubAnnotations.generate_issue_annotation(make_issue(severity=severity))

        assert annotation.startswith(f"::{level} title=")
        assert prefix in annotation

    def test_no_file_parameter_without_source(self):
        annotation = GitHubAnnotations.generate_issue_annotation(make_issue())

        assert "file=" not in annotation

    def test_no_suggestions(self):
        annotation = GitHubAnnotations.generate_issue_annotation(make_issue(suggested=[]))

        assert "suggested" not in annotation

    def test_multiline_names_are_escaped(self):
        annotation = GitHubAnnotations.generate_issue_annotation(make_issue(screen_name="Login\nForm 100%"))

        assert "\n" not in annotation
        assert "Login%0AForm 100%25" in annotation


class TestResultAnnotations:
    """Test summary, flow and grouped annotations for full results."""

    def test_summary_with_criticals(self, analyzer, login_screen):
        result = analyzer.analyze([login_screen])

        summary = GitHubAnnotations.generate_summary_annotation(result)

        assert summary[0].startswith("::error::❌ 2 critical")
        assert summary[1] == "::notice::Total: 3 issues in 1 screens (Critical: 2, Warning: 1, Info: 0)"

    def test_summary_without_issues(self, analyzer):
        summary = GitHubAnnotations.generate_summary_annotation(analyzer.analyze([]))

        assert summary == ["::notice::✅ No missing edge cases in 0 screens."]

    def test_flow_annotations(self, analyzer, screen_export):
        result = analyzer.analyze(parse_screens(screen_export))

        assert GitHubAnnotations.generate_flow_annotations(result) == [
            "::notice title=Dead end::Order Details has no outgoing connections",
            "::notice title=Orphan screen::Login Form is not reachable from any other screen",
        ]

    def test_grouped_annotations(self, analyzer, login_screen):
        result = analyzer.analyze([login_screen])

        lines = GitHubAnnotations.generate_group_annotations(result.screens)

        assert lines[0] == "::group::❌ Login Form"
        assert lines[-1] == "::endgroup::"
        assert len(lines) == 5

    def test_render_flat(self, analyzer, login_screen):
        lines = GitHubAnnotations.render(analyzer.analyze([login_screen]), "login.json")

        assert sum(1 for line in lines if "file=login.json" in line) == 3
        assert lines[-1].startswith("::notice title=Orphan screen::")

    def test_print_annotations(self, analyzer, login_screen, capsys):
        GitHubAnnotations.print_annotations(analyzer.analyze([login_screen]), grouped=True)

        out = capsys.readouterr().out
        assert "::group::❌ Login Form" in out


class TestOutputUtilities:
    """Test GitHub Actions output variables."""

    def test_set_output_with_github_output_file(self, tmp_path, monkeypatch):
        output_file = tmp_path / "github_output"
        output_file.touch()
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        GitHubAnnotations.set_output("critical-count", "2")

        assert output_file.read_text() == "critical-count=2\n"

    def test_set_output_legacy(self, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)

        with patch("builtins.print") as mock_print:
            GitHubAnnotations.set_output("total-issues", "7")

        mock_print.assert_called_once_with("::set-output name=total-issues::7", flush=True)
