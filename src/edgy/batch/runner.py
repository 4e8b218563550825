"""
Batch runner.

Directory-to-directory analysis used by CI: every `<name>.json` screen
export in the input directory produces `<name>-results.json` in the output
directory. A file that fails to load or analyze produces no output at all;
the remaining files are still processed.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import structlog

from edgy.analysis.application.analyzer import EdgeCaseAnalyzer
from edgy.analysis.domain.models import AnalysisResult
from edgy.analysis.infrastructure.screen_loader import load_screens_file
from edgy.shared.domain.exceptions import EdgyError
from edgy.shared.infrastructure.logging import get_logger
from edgy.shared.utils.json_io import write_json_atomic

logger = get_logger(__name__)

RESULTS_SUFFIX = "-results.json"
PLACEHOLDER_NAME = ".gitkeep"


def results_path_for(source: Path, output_dir: Path) -> Path:
    """`screens/checkout.json` -> `<output_dir>/checkout-results.json`."""
    return output_dir / f"{source.stem}{RESULTS_SUFFIX}"


@dataclass
class BatchOutcome:
    """Outcome of one screen file."""

    source: Path
    output: Optional[Path] = None
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class BatchRunner:
    """Analyzes every screen export in a directory."""

    def __init__(self, analyzer: EdgeCaseAnalyzer, input_dir: Path | str, output_dir: Path | str):
        self.analyzer = analyzer
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)

    def discover(self) -> List[Path]:
        """
        Screen exports to analyze, sorted by file name.

        When results are written next to the inputs, earlier `*-results.json`
        files are left out so a rerun does not analyze its own output.
        """
        same_dir = self.input_dir.resolve() == self.output_dir.resolve()
        sources: List[Path] = []
        for path in sorted(self.input_dir.glob("*.json")):
            if not path.is_file():
                continue
            if same_dir and path.name.endswith(RESULTS_SUFFIX):
                logger.info("results_file_skipped", path=str(path))
                continue
            sources.append(path)
        return sources

    def ensure_input_dir(self) -> bool:
        """
        Create the input directory with a placeholder if it does not exist.

        Returns:
            True if the directory already existed
        """
        if self.input_dir.is_dir():
            return True
        self.input_dir.mkdir(parents=True, exist_ok=True)
        (self.input_dir / PLACEHOLDER_NAME).write_text("# Screen exports will appear here\n", encoding="utf-8")
        logger.info("screens_dir_created", input_dir=str(self.input_dir))
        return False

    def run(self) -> List[BatchOutcome]:
        """Process all screen files; one outcome per file."""
        if not self.ensure_input_dir():
            return []

        sources = self.discover()
        if not sources:
            logger.info("no_screen_files_found", input_dir=str(self.input_dir))
            return []

        self.output_dir.mkdir(parents=True, exist_ok=True)
        outcomes = [self.process_file(source) for source in sources]

        failed = sum(1 for o in outcomes if not o.succeeded)
        logger.info("batch_completed", files=len(outcomes), failed=failed, output_dir=str(self.output_dir))
        return outcomes

    def process_file(self, source: Path) -> BatchOutcome:
        """Analyze one file and write its results; nothing is written on failure."""
        with structlog.contextvars.bound_contextvars(screen_file=source.name):
            try:
                screens = load_screens_file(source)
                result = self.analyzer.analyze(screens)
                output = write_json_atomic(results_path_for(source, self.output_dir), result.to_json())
            except (EdgyError, OSError) as e:
                logger.error("batch_file_failed", error=str(e))
                return BatchOutcome(source=source, error=str(e))

            logger.info(
                "batch_file_analyzed",
                total_issues=result.total_issues,
                critical=result.critical_count,
                output=str(output),
            )
            return BatchOutcome(source=source, output=output, result=result)
