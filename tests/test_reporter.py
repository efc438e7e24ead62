"""Tests for metrics reporting."""

import json
import math

import pytest

from confmetrics.core.config import CalculatorConfig
from confmetrics.core.types import ConfusionCounts
from confmetrics.metrics.calculator import MetricsCalculator
from confmetrics.metrics.reporter import Reporter


@pytest.fixture
def calculator():
    return MetricsCalculator(config=CalculatorConfig())


class TestReporter:
    """Tests for Reporter class."""

    def test_print_summary(self, calculator, capsys):
        """Test summary lists every metric."""
        counts = ConfusionCounts(85, 92, 15, 8)
        Reporter(decimals=4).print_summary(calculator.compute_counts(counts), counts)

        out = capsys.readouterr().out
        assert "Accuracy: 0.8850" in out
        assert "Sensitivity (Recall): 0.9140" in out
        assert "Specificity: 0.8598" in out
        assert "Precision: 0.8500" in out
        assert "F-Score: 0.8808" in out
        assert "TP: 85" in out

    def test_print_summary_warnings(self, calculator, capsys):
        """Test undefined metrics are shown."""
        Reporter(decimals=2).print_summary(calculator.compute(0, 0, 0, 5))

        out = capsys.readouterr().out
        assert "Specificity: undefined" in out
        assert "Precision undefined, reported as 0" in out
        assert "F-Score undefined, reported as 0" in out

    def test_compare(self, calculator, capsys):
        """Test comparison table has one row per result."""
        results = calculator.compute_many({
            "model_a": (85, 92, 15, 8),
            "model_b": (50, 20, 0, 30),
        })
        Reporter(decimals=3).compare(results)

        out = capsys.readouterr().out
        assert "METRICS COMPARISON" in out
        assert "model_a" in out
        assert "model_b" in out
        assert "0.885" in out

    def test_report_dict_is_json(self, calculator):
        """Test report dict serializes and maps NaN to None."""
        counts = ConfusionCounts(0, 0, 0, 5)
        report = Reporter(decimals=4).generate_report_dict(calculator.compute_counts(counts), counts)

        assert report["metrics"]["specificity"] is None
        assert report["metrics"]["precision"] == 0.0
        assert report["warnings"] == ["precision", "fScore"]
        assert report["counts"] == {"tp": 0, "tn": 0, "fp": 0, "fn": 5}
        json.dumps(report, allow_nan=False)

    def test_report_dict_maps_infinity_to_none(self):
        """Test infinite ratios from negative counts serialize as None."""
        calculator = MetricsCalculator(validate_counts=False, config=CalculatorConfig())
        result = calculator.compute(5, 5, 0, -5)
        report = Reporter(decimals=4).generate_report_dict(result)

        assert math.isinf(result.sensitivity)
        assert report["metrics"]["sensitivity"] is None
        json.loads(json.dumps(report, allow_nan=False))

    def test_infinite_value_printed_undefined(self):
        """Test infinite values print as undefined."""
        assert Reporter(decimals=2).format_value(math.inf) == "undefined"

    def test_to_frame(self, calculator):
        """Test DataFrame export."""
        results = calculator.compute_many({
            "model_a": (85, 92, 15, 8),
            "model_b": (50, 20, 0, 30),
        })
        frame = Reporter(decimals=4).to_frame(results)

        assert list(frame.columns) == ["accuracy", "sensitivity", "specificity", "precision", "fScore"]
        assert list(frame.index) == ["model_a", "model_b"]
        assert frame.loc["model_b", "precision"] == 1.0
        assert frame.loc["model_a", "accuracy"] == pytest.approx(0.885)

    def test_decimals_from_config(self, monkeypatch):
        """Test decimals default to CONFMETRICS_DECIMALS."""
        monkeypatch.setenv("CONFMETRICS_DECIMALS", "2")

        assert Reporter().decimals == 2
