"""
GitHub Actions Annotations Generator for Edgy.

Generates GitHub Actions workflow commands for analysis results:
- ::error - Critical missing edge cases
- ::warning - Warning level missing edge cases
- ::notice - Info level issues, flow issues and the summary
- ::group - Collapsible per-screen sections

Reference: https://docs.github.com/en/actions/using-workflows/workflow-commands-for-github-actions
"""

import os
from pathlib import Path
from typing import List, Optional

from edgy.analysis.domain.models import AnalysisResult, Issue, ScreenAnalysis
from edgy.knowledge.domain.enums import EdgeCaseSeverity


def _escape(message: str) -> str:
    # Workflow command data must not contain raw %, CR or LF
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubAnnotations:
    """Generate GitHub Actions workflow command annotations."""

    LEVELS = {
        EdgeCaseSeverity.CRITICAL: "error",
        EdgeCaseSeverity.WARNING: "warning",
        EdgeCaseSeverity.INFO: "notice",
    }

    PREFIXES = {
        EdgeCaseSeverity.CRITICAL: "🔴 CRITICAL",
        EdgeCaseSeverity.WARNING: "🟡 WARNING",
        EdgeCaseSeverity.INFO: "🔵 INFO",
    }

    @staticmethod
    def generate_issue_annotation(issue: Issue, source_file: Optional[str] = None) -> str:
        """
        Generate GitHub Actions annotation for a single issue.

        Args:
            issue: Missing edge case
            source_file: Screen export the issue came from, attached as file=

        Returns:
            GitHub Actions workflow command string
        """
        level = GitHubAnnotations.LEVELS.get(issue.severity, "notice")
        prefix = GitHubAnnotations.PREFIXES.get(issue.severity, "INFO")

        message = f"[{issue.edge_case_id}] {prefix}: {issue.screen_name} is missing {issue.name}"
        if issue.suggested_components:
            message += f" (suggested: {', '.join(issue.suggested_components)})"

        params = []
        if source_file:
            params.append(f"file={source_file}")
        params.append(f"title={_escape(issue.name)}")

        return f"::{level} {','.join(params)}::{_escape(message)}"

    @staticmethod
    def generate_all_annotations(result: AnalysisResult, source_file: Optional[str] = None) -> List[str]:
        return [
            GitHubAnnotations.generate_issue_annotation(issue, source_file)
            for issue in result.all_issues
        ]

    @staticmethod
    def generate_summary_annotation(result: AnalysisResult) -> List[str]:
        """
        Generate summary annotations for an analysis result.

        Returns:
            List of summary annotation strings
        """
        annotations = []

        if result.critical_count > 0:
            annotations.append(
                f"::error::❌ {result.critical_count} critical edge cases are missing. Design them before handoff."
            )

        if result.total_issues == 0:
            annotations.append(f"::notice::✅ No missing edge cases in {result.total_screens} screens.")
        else:
            annotations.append(
                f"::notice::Total: {result.total_issues} issues in {result.total_screens} screens "
                f"(Critical: {result.critical_count}, Warning: {result.warning_count}, Info: {result.info_count})"
            )

        return annotations

    @staticmethod
    def generate_flow_annotations(result: AnalysisResult) -> List[str]:
        annotations = []
        for name in result.flow_issues.dead_ends:
            annotations.append(f"::notice title=Dead end::{_escape(name)} has no outgoing connections")
        for name in result.flow_issues.orphan_screens:
            annotations.append(f"::notice title=Orphan screen::{_escape(name)} is not reachable from any other screen")
        return annotations

    @staticmethod
    def generate_group_annotations(screens: List[ScreenAnalysis], source_file: Optional[str] = None) -> List[str]:
        """
        Generate grouped annotations, one group per screen.

        Args:
            screens: Per-screen analyses
            source_file: Screen export the screens came from
        """
        annotations = []

        for screen in screens:
            status = "✅" if not screen.issues else "❌"
            annotations.append(f"::group::{status} {screen.screen_name}")

            if screen.issues:
                for issue in screen.issues:
                    annotations.append(GitHubAnnotations.generate_issue_annotation(issue, source_file))
            else:
                annotations.append("::notice::No missing edge cases on this screen")

            annotations.append("::endgroup::")

        return annotations

    @staticmethod
    def render(result: AnalysisResult, source_file: Optional[str] = None, grouped: bool = False) -> List[str]:
        """Summary, then issues (flat or grouped), then flow notices."""
        lines = GitHubAnnotations.generate_summary_annotation(result)
        if grouped:
            lines.extend(GitHubAnnotations.generate_group_annotations(result.screens, source_file))
        else:
            lines.extend(GitHubAnnotations.generate_all_annotations(result, source_file))
        lines.extend(GitHubAnnotations.generate_flow_annotations(result))
        return lines

    @staticmethod
    def print_annotations(result: AnalysisResult, source_file: Optional[str] = None, grouped: bool = False) -> None:
        """Print annotations to stdout (for GitHub Actions)."""
        for annotation in GitHubAnnotations.render(result, source_file, grouped):
            print(annotation, flush=True)

    @staticmethod
    def set_output(name: str, value: str) -> None:
        """
        Set GitHub Actions output variable.

        Writes to $GITHUB_OUTPUT when available, otherwise falls back to the
        legacy set-output command.
        """
        github_output_path = os.getenv("GITHUB_OUTPUT")
        if github_output_path and Path(github_output_path).exists():
            with open(github_output_path, "a", encoding="utf-8") as f:
                f.write(f"{name}={value}\n")
        else:
            print(f"::set-output name={name}::{value}", flush=True)
