import json
from pathlib import Path

import pytest

from byte_efficiency.core.config import AuditConfig


def test_audit_config_defaults():
    config = AuditConfig()
    assert config.ignore_threshold_in_percent == 0.1
    assert config.ignore_threshold_in_bytes == 2048
    assert config.enabled_audits == ["unminified-javascript", "unminified-css"]


def test_audit_config_from_env(monkeypatch):
    monkeypatch.setenv("BYTE_EFFICIENCY_IGNORE_THRESHOLD_IN_PERCENT", "0.25")
    monkeypatch.setenv("BYTE_EFFICIENCY_IGNORE_THRESHOLD_IN_BYTES", "4096")
    monkeypatch.setenv("BYTE_EFFICIENCY_ENABLED_AUDITS", "unminified-css, ")

    config = AuditConfig.from_env()

    assert config.ignore_threshold_in_percent == 0.25
    assert config.ignore_threshold_in_bytes == 4096
    assert config.enabled_audits == ["unminified-css"]


def test_audit_config_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("BYTE_EFFICIENCY_IGNORE_THRESHOLD_IN_BYTES", "lots")

    with pytest.raises(ValueError):
        AuditConfig.from_env()


def test_audit_config_from_file_json(tmp_path: Path):
    data = {"ignore_threshold_in_bytes": 1024, "enabled_audits": ["unminified-javascript"]}
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))

    config = AuditConfig.from_file(str(path))

    assert config.ignore_threshold_in_bytes == 1024
    assert config.ignore_threshold_in_percent == 0.1
    assert config.enabled_audits == ["unminified-javascript"]


def test_audit_config_from_file_yaml(tmp_path: Path):
    yaml = pytest.importorskip("yaml")
    data = {"ignore_threshold_in_percent": 0.05}
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data))

    config = AuditConfig.from_file(str(path))

    assert config.ignore_threshold_in_percent == 0.05
    assert config.ignore_threshold_in_bytes == 2048


def test_audit_config_from_file_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        AuditConfig.from_file(str(tmp_path / "missing.json"))

    path = tmp_path / "config.toml"
    path.write_text("")
    with pytest.raises(ValueError):
        AuditConfig.from_file(str(path))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ignore_threshold_in_percent": 1.0},
        {"ignore_threshold_in_percent": -0.1},
        {"ignore_threshold_in_bytes": -1},
    ],
)
def test_audit_config_validate_rejects_invalid_thresholds(kwargs):
    with pytest.raises(ValueError):
        AuditConfig(**kwargs)
