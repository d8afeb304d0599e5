import json

import pytest
from pydantic import ValidationError

from ringcalc.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.sampling.sample_count == 10
    assert s.sampling.resolution_factor == 1000
    assert s.sampling.capacity == 10_000
    assert s.sampling.dt == pytest.approx(0.001)
    assert s.buffer.boundary == "clamp"
    assert s.integral.method == "wrap_aware"


def test_from_env(monkeypatch):
    monkeypatch.setenv("RINGCALC_SAMPLING__RESOLUTION_FACTOR", "10")
    monkeypatch.setenv("RINGCALC_BUFFER__BOUNDARY", "wrap")
    s = Settings()
    assert s.sampling.resolution_factor == 10
    assert s.sampling.capacity == 100
    assert s.sampling.dt == pytest.approx(0.1)
    assert s.buffer.boundary == "wrap"


@pytest.mark.parametrize(
    "data",
    [
        {"sampling": {"resolution_factor": 0}},
        {"sampling": {"sample_count": -3}},
        {"buffer": {"boundary": "reflect"}},
        {"integral": {"method": "simpson"}},
    ],
)
def test_invalid_values_rejected(data):
    with pytest.raises(ValidationError):
        Settings.model_validate(data)


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"sampling": {"sample_count": 4}, "integral": {"method": "trapezoidal"}}))
    s = load_settings(p)
    assert s.sampling.sample_count == 4
    assert s.integral.method == "trapezoidal"


def test_load_settings_requires_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


@pytest.mark.skipif(yaml is None, reason="PyYAML not installed")
def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("sampling:\n  resolution_factor: 5\nreport:\n  precision: 4\n")
    s = load_settings(p)
    assert s.sampling.resolution_factor == 5
    assert s.report.precision == 4
