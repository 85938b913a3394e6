"""Tests for the text and JSON report formatting."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bundle_analyzer.analysis.analyzer import BundleAnalyzer
from bundle_analyzer.models.analysis_result import AnalysisResult
from bundle_analyzer.models.module_report import ModuleReport
from bundle_analyzer.models.options import AnalyzerOptions, ReportOptions
from bundle_analyzer.reporting.formatter import (
    describe_error,
    format_bytes,
    format_json,
    format_number,
    format_report,
)

BORDER = "-----------------------------"


class TestFormatBytes:
    """Test suite for human-readable byte sizes."""

    @pytest.mark.parametrize(
        "num_bytes,expected",
        [
            (0, "0 Byte"),
            (1, "1 Bytes"),
            (999, "999 Bytes"),
            (1000, "1 KB"),
            (1536, "1.536 KB"),
            (1500000, "1.5 MB"),
            (2000000000, "2 GB"),
            (1234567, "1.235 MB"),
            (5000000000000, "5000 GB"),
        ],
    )
    def test_format_bytes(self, num_bytes, expected):
        """Test the decimal scale and trailing-zero removal."""
        assert format_bytes(num_bytes) == expected


class TestFormatNumber:
    """Test suite for percentage rendering."""

    def test_integral_floats_lose_decimal(self):
        """Test 50.0 renders as 50."""
        assert format_number(50.0) == "50"
        assert format_number(0.0) == "0"

    def test_fractions_kept(self):
        """Test two-decimal values render unchanged."""
        assert format_number(33.33) == "33.33"
        assert format_number(12) == "12"


class TestFormatReport:
    """Test suite for the fixed-width text report."""

    @pytest.fixture
    def result(self):
        """Return the analysis of a two-module bundle."""
        bundle = {
            "modules": [
                {
                    "id": "/proj/A.js",
                    "renderedLength": 600,
                    "originalLength": 1000,
                    "dependencies": [],
                    "renderedExports": ["render", "mount"],
                    "removedExports": ["debug"],
                },
                {
                    "id": "/proj/B.js",
                    "renderedLength": 400,
                    "originalLength": 500,
                    "dependencies": ["/proj/A.js"],
                },
            ]
        }
        return BundleAnalyzer().analyze(bundle, AnalyzerOptions(root="/proj/"))

    def test_full_layout(self, result):
        """Test the report layout line by line."""
        expected = "\n".join(
            [
                BORDER,
                "Rollup File Analysis",
                BORDER,
                "bundle size:    1 KB",
                "original size:  1.5 KB",
                "code reduction: 33.33 %",
                "module count:   2",
                BORDER,
                "file:            A.js",
                "bundle space:    60 %",
                "rendered size:   600 Bytes",
                "original size:   1 KB",
                "code reduction:  40 %",
                "dependents:      1",
                "  - B.js",
                BORDER,
                "file:            B.js",
                "bundle space:    40 %",
                "rendered size:   400 Bytes",
                "original size:   500 Bytes",
                "code reduction:  20 %",
                "dependents:      0",
                BORDER,
            ]
        ) + "\n"

        assert format_report(result) == expected

    def test_hide_deps(self, result):
        """Test that dependents are counted but not listed."""
        report = format_report(result, ReportOptions(hide_deps=True))

        assert "dependents:      1" in report
        assert "  - B.js" not in report

    def test_show_exports(self, result):
        """Test export listing for modules with both export lists."""
        report = format_report(result, ReportOptions(show_exports=True))

        assert (
            "used exports:    2\n"
            "  - render\n"
            "  - mount\n"
            "unused exports:  1\n"
            "  - debug\n"
        ) in report
        # B.js carries no export lists
        assert report.count("used exports:") == 1

    def test_mapping_options(self, result):
        """Test bundler-style option names given as a mapping."""
        report = format_report(result, {"hideDeps": True, "showExports": True})

        assert report.startswith(BORDER + "\nRollup File Analysis\n")
        assert "dependents:      1" in report
        assert "  - B.js" not in report
        assert "used exports:    2" in report

    def test_exports_hidden_by_default(self, result):
        """Test exports are only listed on request."""
        assert "used exports" not in format_report(result)

    def test_dependents_root_stripped(self):
        """Test the root prefix is removed from dependent ids."""
        result = AnalysisResult(
            bundle_size=10,
            bundle_orig_size=10,
            bundle_reduction=0.0,
            module_count=1,
            modules=[ModuleReport(id="a.js", size=10, orig_size=10, dependents=["/proj/b.js"])],
        )

        report = format_report(result, ReportOptions(root="/proj/"))

        assert "  - b.js\n" in report

    def test_unknown_original_size(self):
        """Test a module without original size shows the unknown marker."""
        result = AnalysisResult(
            bundle_size=10,
            bundle_orig_size=0,
            bundle_reduction=0.0,
            module_count=1,
            modules=[ModuleReport(id="a.js", size=10)],
        )

        report = format_report(result)

        assert "original size:   unknown\n" in report
        assert "original size:  0 Byte\n" in report

    def test_empty_result(self):
        """Test the header is rendered for an empty analysis."""
        result = AnalysisResult(
            bundle_size=0, bundle_orig_size=0, bundle_reduction=0.0, module_count=0
        )

        report = format_report(result)

        assert report.startswith(BORDER + "\nRollup File Analysis\n")
        assert "bundle size:    0 Byte" in report
        assert report.count(BORDER) == 3

    def test_malformed_result_returns_error_text(self):
        """Test formatting never raises for a malformed result."""
        report = format_report(object())

        assert isinstance(report, str)
        assert report.startswith("AttributeError: ")

    def test_malformed_module_returns_error_text(self):
        """Test a broken module entry is reported as text."""
        result = AnalysisResult(
            bundle_size=1,
            bundle_orig_size=1,
            bundle_reduction=0.0,
            module_count=1,
            modules=[ModuleReport(id="a.js", size=1, dependents=None)],
        )

        assert format_report(result).startswith("TypeError: ")


class TestFormatJson:
    """Test suite for JSON rendering."""

    def test_json_round_trip_fields(self):
        """Test JSON output contains totals and modules."""
        result = AnalysisResult(
            bundle_size=10,
            bundle_orig_size=20,
            bundle_reduction=50.0,
            module_count=1,
            modules=[ModuleReport(id="a.js", size=10, orig_size=20, reduction=50.0)],
        )

        data = json.loads(format_json(result))

        assert data["bundle_reduction"] == 50.0
        assert data["modules"][0]["id"] == "a.js"


class TestDescribeError:
    """Test suite for error descriptions."""

    def test_with_message(self):
        assert describe_error(ValueError("bad")) == "ValueError: bad"

    def test_without_message(self):
        assert describe_error(RuntimeError()) == "RuntimeError"

