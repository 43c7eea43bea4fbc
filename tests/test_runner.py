import json
from pathlib import Path

import numpy as np
import pandas as pd

from sinc_window.config import WindowDesign
from sinc_window.dsp.cutoff import calculate_cutoff
from sinc_window.dsp.windows import WindowFamily, make_window
from sinc_window.exp.runner import run_design, summarize_design
from sinc_window.exp.sweep import run_sweep


def test_run_design_writes_outputs(tmp_path) -> None:
    cfg = {"name": "bh", "window": {"family": "blackman_harris", "npoints": 128}, "analysis": {"oversample": 16}}
    summary = run_design(cfg, output_root=str(tmp_path))
    run_dir = Path(summary["run_dir"])
    assert run_dir.name.endswith("_bh")
    for name in ("params.yaml", "window.npy", "metrics.json"):
        assert (run_dir / name).exists()
    window = np.load(run_dir / "window.npy")
    np.testing.assert_array_equal(window, make_window(128, WindowFamily.BLACKMAN_HARRIS))
    with open(run_dir / "metrics.json") as f:
        metrics = json.load(f)
    assert metrics["cutoff_estimated"] is True
    assert np.isclose(metrics["cutoff"], calculate_cutoff(128, WindowFamily.BLACKMAN_HARRIS))
    assert metrics["family"] == "blackman_harris"


def test_run_design_explicit_cutoff(tmp_path) -> None:
    cfg = {"window": {"family": "hann", "npoints": 64, "f_cutoff": 0.8}}
    summary = run_design(cfg, run_name="fixed", output_root=str(tmp_path))
    assert summary["cutoff"] == 0.8
    assert summary["cutoff_estimated"] is False


def test_run_sweep_table(tmp_path) -> None:
    sweep_cfg = {
        "base_config": {"window": {"family": "hann", "npoints": 64}},
        "param_grid": {"window.family": ["hann", "blackman2"], "window.npoints": [128, 256]},
        "oversample": 8,
        "output_root": str(tmp_path),
    }
    df = run_sweep(sweep_cfg)
    assert len(df) == 4
    assert (tmp_path / "cutoff_table.csv").exists()
    for family, group in df.groupby("family"):
        group = group.sort_values("npoints")
        assert group["cutoff"].is_monotonic_increasing
    row = df[(df["family"] == "blackman2") & (df["npoints"] == 128)].iloc[0]
    assert np.isclose(row["cutoff"], 0.926, atol=0.001)
    # A second sweep appends to the existing table
    df2 = run_sweep(sweep_cfg)
    assert len(df2) == 8
    assert len(pd.read_csv(tmp_path / "cutoff_table.csv")) == 8


def test_run_sweep_base_config_from_file(tmp_path) -> None:
    base = tmp_path / "base.yaml"
    base.write_text("window:\n  family: hann\n  npoints: 64\n")
    df = run_sweep({"base_config": str(base), "param_grid": {"window.npoints": [32, 64]}, "output_root": str(tmp_path)})
    assert list(df["npoints"]) == [32, 64]


def test_run_design_generates_window_once(tmp_path, monkeypatch) -> None:
    calls = []
    original = WindowDesign.coefficients

    def counting(self):
        calls.append(self.npoints)
        return original(self)

    monkeypatch.setattr(WindowDesign, "coefficients", counting)
    run_design({"window": {"family": "hann", "npoints": 64}}, output_root=str(tmp_path))
    assert calls == [64]


def test_summarize_design_uses_given_window() -> None:
    design = WindowDesign(WindowFamily.HANN, 64)
    window = np.ones(64)
    summary = summarize_design(design, oversample=8, window=window)
    # A rectangular window has unit coherent gain, the Hann window 0.5
    assert np.isclose(summary["coherent_gain"], 1.0)


def test_run_sweep_uses_design_oversample(tmp_path) -> None:
    base_cfg = {"window": {"family": "hann", "npoints": 64}, "analysis": {"oversample": 8}}
    sweep_cfg = {
        "base_config": base_cfg,
        "param_grid": {"window.npoints": [64]},
        "output_root": str(tmp_path / "sweep"),
    }
    row = run_sweep(sweep_cfg).iloc[0]
    summary = run_design(base_cfg, output_root=str(tmp_path / "design"))
    assert np.isclose(row["highest_sidelobe_db"], summary["highest_sidelobe_db"])
    # The sweep-level default gives a different resolution
    coarse = summarize_design(WindowDesign(WindowFamily.HANN, 64), oversample=64)
    assert not np.isclose(row["highest_sidelobe_db"], coarse["highest_sidelobe_db"], atol=1e-9, rtol=0)


def test_run_sweep_oversample_as_grid_key(tmp_path) -> None:
    sweep_cfg = {
        "base_config": {"window": {"family": "blackman", "npoints": 64}},
        "param_grid": {"analysis.oversample": [8, 32]},
        "output_root": str(tmp_path),
    }
    df = run_sweep(sweep_cfg)
    for _, row in df.iterrows():
        expected = summarize_design(WindowDesign(WindowFamily.BLACKMAN, 64), oversample=int(row["analysis.oversample"]))
        assert np.isclose(row["highest_sidelobe_db"], expected["highest_sidelobe_db"])


def test_run_sweep_resolves_base_config_next_to_sweep_file(tmp_path, monkeypatch) -> None:
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    (config_dir / "base.yaml").write_text("window:\n  family: hann\n  npoints: 64\n")
    # Run from a different working directory
    workdir = tmp_path / "elsewhere"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    sweep_cfg = {"base_config": "base.yaml", "param_grid": {"window.npoints": [128]}, "output_root": str(tmp_path)}
    df = run_sweep(sweep_cfg, config_dir=str(config_dir))
    assert list(df["family"]) == ["hann"]
    assert list(df["npoints"]) == [128]
