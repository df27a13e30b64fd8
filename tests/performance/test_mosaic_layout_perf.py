import json
import timeit
from pathlib import Path
from typing import Final

from mosaic.layout import LayoutConfig, compute_height, compute_layout

from .perf_baselines import PERF_BASELINES, PerfBaseline

RESULTS_FILENAME: Final[str] = "mosaic_layout_perf_metrics.json"

_GLOBALS = {
    "compute_layout": compute_layout,
    "compute_height": compute_height,
    "cfg": LayoutConfig(max_width=358, max_height=300, spacing=2),
    "four": [0.5, 1.3, 1.0, 0.7],
    "ten": [0.6, 1.0, 1.5, 0.8, 1.2, 0.7, 1.0, 2.0, 0.9, 1.1],
}


def _run_benchmark(stmt: str, baseline: PerfBaseline) -> float:
    duration = timeit.timeit(stmt, globals=_GLOBALS, number=baseline.loops)
    per_call_us = duration / baseline.loops * 1e6
    return per_call_us


def _record_metric(directory: Path, name: str, value_us: float) -> None:
    metrics_path = directory / RESULTS_FILENAME
    metrics = {}
    if metrics_path.exists():
        metrics = json.loads(metrics_path.read_text(encoding="utf-8"))
    metrics[name] = value_us
    metrics_path.write_text(json.dumps(metrics, indent=2), encoding="utf-8")


def _assert_perf(name: str, stmt: str) -> float:
    baseline = PERF_BASELINES[name]
    per_call_us = _run_benchmark(stmt, baseline)
    assert (
        per_call_us <= baseline.max_us_per_call
    ), f"{name} took {per_call_us:.3f}us per call, expected ≤ {baseline.max_us_per_call:.2f}us"
    return per_call_us


def test_compute_layout_four_perf(tmp_path):
    per_call_us = _assert_perf("compute_layout_four", "compute_layout(four, cfg)")
    _record_metric(tmp_path, "compute_layout_four", per_call_us)


def test_compute_layout_ten_perf(tmp_path):
    per_call_us = _assert_perf("compute_layout_ten", "compute_layout(ten, cfg)")
    _record_metric(tmp_path, "compute_layout_ten", per_call_us)


def test_compute_height_ten_perf(tmp_path):
    per_call_us = _assert_perf("compute_height_ten", "compute_height(ten, cfg)")
    _record_metric(tmp_path, "compute_height_ten", per_call_us)
