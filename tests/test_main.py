"""Smoke test for the table-generation script."""

import importlib.util
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_main():
    spec = importlib.util.spec_from_file_location("betacf_main", os.path.join(ROOT, "main.py"))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_main_writes_tables(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main = _load_main()
    outdir = tmp_path / "out"

    assert main.main(["--outdir", str(outdir), "--df", "5", "10", "--no-plots"]) == 0
    assert (outdir / "t_table.csv").exists()
    assert (outdir / "beta_table.csv").exists()
    assert not (outdir / "figures").exists()
