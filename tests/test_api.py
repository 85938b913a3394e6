"""Tests for the awaitable analyze/formatted entry points."""

import asyncio
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bundle_analyzer import analyze, formatted
from bundle_analyzer.models.analysis_result import AnalysisResult
from bundle_analyzer.models.options import AnalyzerOptions


@pytest.fixture
def bundle():
    """Return a two-module bundle with absolute ids."""
    return {
        "modules": [
            {
                "id": "/proj/src/a.js",
                "renderedLength": 500,
                "originalLength": 1000,
                "dependencies": [],
            },
            {
                "id": "/proj/src/b.js",
                "renderedLength": 250,
                "originalLength": 500,
                "dependencies": ["/proj/src/a.js"],
            },
        ]
    }


class TestAnalyze:
    """Test suite for the awaitable analyze entry point."""

    def test_returns_analysis_result(self, bundle):
        """Test a successful analysis resolves to an AnalysisResult."""
        result = asyncio.run(analyze(bundle, {"root": "/proj/"}))

        assert isinstance(result, AnalysisResult)
        assert result.bundle_size == 750
        assert result.get_module("src/a.js").dependents == ("src/b.js",)

    def test_accepts_options_instance(self, bundle):
        """Test AnalyzerOptions can be passed directly."""
        result = asyncio.run(analyze(bundle, AnalyzerOptions(root="/proj/", limit=1)))

        assert [m.id for m in result.modules] == ["src/a.js"]

    def test_accepts_bundler_option_names(self, bundle):
        """Test camelCase option names from bundler configs."""
        result = asyncio.run(
            analyze(bundle, {"root": "/proj/", "transformModuleId": str.upper})
        )

        assert result.get_module("SRC/A.JS").dependents == ("SRC/B.JS",)

    def test_root_defaults_to_working_directory(self, tmp_path, monkeypatch):
        """Test ids are made relative to the working directory by default."""
        monkeypatch.chdir(tmp_path)
        cwd = os.getcwd()
        bundle = {
            "modules": [
                {"id": f"{cwd}/src/a.js", "renderedLength": 1, "dependencies": []}
            ]
        }

        result = asyncio.run(analyze(bundle))

        assert result.modules[0].id == "/src/a.js"

    def test_malformed_bundle_raises(self):
        """Test malformed input surfaces as the awaited exception."""
        with pytest.raises(ValueError) as exc:
            asyncio.run(analyze({"modules": [{"dependencies": []}]}))

        assert exc.value.__cause__ is not None

    def test_invalid_options_raise(self, bundle):
        """Test options of the wrong type are rejected."""
        with pytest.raises(TypeError):
            asyncio.run(analyze(bundle, "root"))

    def test_concurrent_invocations_are_independent(self, bundle):
        """Test concurrent analyses do not share state."""

        async def run_both():
            return await asyncio.gather(
                analyze(bundle, {"root": "/proj/", "limit": 1}),
                analyze(bundle, {"root": "/proj/", "filter": "b.js"}),
            )

        first, second = asyncio.run(run_both())

        assert [m.id for m in first.modules] == ["src/a.js"]
        assert [m.id for m in second.modules] == ["src/b.js"]
        assert first.bundle_size == second.bundle_size == 750


class TestFormatted:
    """Test suite for the awaitable formatted entry point."""

    def test_returns_report(self, bundle):
        """Test the report text is produced."""
        report = asyncio.run(formatted(bundle, {"root": "/proj/"}))

        assert report.startswith("-----------------------------\nRollup File Analysis\n")
        assert "file:            src/a.js\n" in report
        assert "  - src/b.js\n" in report

    def test_report_options(self, bundle):
        """Test report options are honored."""
        report = asyncio.run(formatted(bundle, {"root": "/proj/", "hideDeps": True}))

        assert "  - src/b.js" not in report

    def test_malformed_bundle_returns_error_text(self):
        """Test analysis errors become the returned text."""
        report = asyncio.run(formatted({"modules": [{"dependencies": []}]}))

        assert report.startswith("ValueError: Module #0: Malformed module record")

    def test_invalid_options_return_error_text(self, bundle):
        """Test option errors become the returned text."""
        report = asyncio.run(formatted(bundle, {"limit": -1}))

        assert report.startswith("ValueError: limit must be non-negative")
