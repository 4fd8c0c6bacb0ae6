"""Tests for the Result type and settings."""

import pytest

from sheetsense.core.config import Settings
from sheetsense.core.models.base import AnalysisIssue, Result


class TestResult:
    """Tests for Result construction and helpers."""

    def test_ok_unwrap(self):
        result = Result.ok(5, warnings=["note"])
        assert result.success
        assert result.unwrap() == 5
        assert result.warnings == ["note"]

    def test_fail_carries_issue(self):
        result = Result.fail("no rows", issue=AnalysisIssue.EMPTY_TABLE)
        assert not result.success
        assert result.issue is AnalysisIssue.EMPTY_TABLE
        with pytest.raises(ValueError, match="no rows"):
            result.unwrap()

    def test_map(self):
        assert Result.ok(2).map(lambda v: v * 10).unwrap() == 20
        failed = Result.fail("boom")
        assert failed.map(lambda v: v * 10) is failed


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.type_sample_size == 10
        assert settings.type_numeric_threshold == 0.7
        assert settings.correlation_numeric_threshold == 0.8
        assert settings.chart_max_partitions == 50
        assert settings.word_frequency_top_n == 100
        assert settings.lexicon_path is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SHEETSENSE_CHART_MAX_PARTITIONS", "5")
        monkeypatch.setenv("SHEETSENSE_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.chart_max_partitions == 5
        assert settings.log_level == "DEBUG"
