import argparse
import sys
import pytest
from src.main import main, positive_int


def test_positive_int():
    assert positive_int("3") == 3
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")

def test_simulate_rejects_zero_steps(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "simulate", "--steps", "0"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 2

def test_simulate_prints_readings_and_profile(monkeypatch, capsys):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(
        sys, "argv",
        ["main.py", "simulate", "--steps", "2", "--fuel-type", "diesel", "simulation.seed=5"],
    )
    main()
    out = capsys.readouterr().out
    assert "[000] co2=" in out
    assert "[001] co2=" in out
    assert "Profile: trend=" in out
