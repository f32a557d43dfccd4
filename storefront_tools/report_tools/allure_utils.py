"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for attaching UI diagnostics to Allure reports
and for turning raw allure-results into an HTML report and a run summary.

Features:
- Text / JSON / screenshot attachment helpers
- Result parsing with pending (skipped) scenario accounting
- HTML report generation with trend history

================================================================================
"""

import json
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import allure
from loguru import logger


PENDING_PREFIX = "Pending:"


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_screenshot(path: Union[str, Path], name: Optional[str] = None):
    """
    Attach a PNG file from disk to Allure report.

    Args:
        path: Screenshot file path
        name: Attachment name (defaults to the file name)
    """
    path = Path(path)
    allure.attach.file(
        str(path),
        name=name or path.name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_page_state(url: str, title: str, name: str = "Page state"):
    """
    Attach the browser location at the moment of a failure.

    Args:
        url: Current page URL
        title: Current document title
        name: Attachment name
    """
    attach_json({"url": url, "title": title}, name=name)


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    pending: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage over executed scenarios."""
        executed = self.total - self.skipped - self.pending
        if executed <= 0:
            return 0.0
        return (self.passed / executed) * 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "pending": self.pending,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


class AllureReportProcessor:
    """
    Processes Allure results and generates reports.

    Skipped results whose status message starts with ``Pending:`` are counted
    as pending rather than skipped.
    """

    def __init__(
        self,
        results_dir: Path,
        report_dir: Optional[Path] = None,
    ):
        """
        Initialize processor.

        Args:
            results_dir: Allure results directory
            report_dir: Output report directory
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """
        Parse Allure result files.

        Returns:
            List of test result dictionaries
        """
        results = []

        for result_file in sorted(self.results_dir.glob("*-result.json")):
            try:
                with open(result_file, encoding="utf-8") as f:
                    results.append(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")

        return results

    def generate_summary(self) -> TestResultSummary:
        """
        Generate summary from results.

        Returns:
            TestResultSummary object
        """
        results = self.parse_results()
        summary = TestResultSummary(total=len(results))

        for result in results:
            status = result.get("status", "unknown")
            if status == "passed":
                summary.passed += 1
            elif status == "failed":
                summary.failed += 1
            elif status == "broken":
                summary.broken += 1
            elif status == "skipped":
                message = (result.get("statusDetails") or {}).get("message", "")
                if PENDING_PREFIX in message:
                    summary.pending += 1
                else:
                    summary.skipped += 1
            else:
                summary.unknown += 1

            summary.duration_ms += result.get("stop", 0) - result.get("start", 0)

        return summary

    def copy_history(self):
        """Copy history from previous report to results so trends survive."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report.

        Returns:
            True if successful
        """
        self.copy_history()

        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean"
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Install allure-commandline to build HTML reports.")
            return False

        if result.returncode == 0:
            logger.info(f"Report generated at {self.report_dir}")
            return True

        logger.error(f"Report generation failed: {result.stderr}")
        return False

    def log_summary(self) -> TestResultSummary:
        """Log the run summary and return it."""
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info("TEST EXECUTION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Total Scenarios: {summary.total}")
        logger.info(f"Passed:          {summary.passed}")
        logger.info(f"Failed:          {summary.failed}")
        logger.info(f"Broken:          {summary.broken}")
        logger.info(f"Pending:         {summary.pending}")
        logger.info(f"Skipped:         {summary.skipped}")
        logger.info(f"Pass Rate:       {summary.pass_rate:.2f}%")
        logger.info(f"Duration:        {summary.duration_ms / 1000:.2f}s")
        logger.info("=" * 60)

        return summary


# ================================================================================
# Convenience Functions
# ================================================================================

def generate_allure_report(
    results_dir: str,
    output_dir: Optional[str] = None,
) -> bool:
    """
    Generate Allure report from results and log the summary.

    Args:
        results_dir: Path to allure-results directory
        output_dir: Optional output directory

    Returns:
        True if the HTML report was generated
    """
    processor = AllureReportProcessor(
        Path(results_dir),
        Path(output_dir) if output_dir else None
    )

    processor.log_summary()
    return processor.generate_report()


__all__ = [
    "PENDING_PREFIX",
    "attach_json",
    "attach_screenshot",
    "attach_page_state",
    "TestResultSummary",
    "AllureReportProcessor",
    "generate_allure_report",
]
