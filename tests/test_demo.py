"""Smoke test for the walk-through script."""

import logging

from primefield.demo import run_demo


def test_demo_runs(capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        run_demo.main()
    out = capsys.readouterr().out
    assert "✗" not in out
    assert out.count("✓") == 8
    assert "rejected" in out
    assert "Cannot combine elements of F_13 and F_31" in out
    assert not any(r.levelno >= logging.ERROR for r in caplog.records)
