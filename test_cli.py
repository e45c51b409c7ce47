"""
Command Line Tests
==================
"""

import pytest
import yaml

from selfservice_settings.cli import main


@pytest.fixture(autouse=True)
def cli_environment(settings, monkeypatch, restore_root_logging):
    monkeypatch.setenv("SELFSERVICEPLUS_GROUP_CONTAINERS", str(settings.container_root))
    monkeypatch.setenv("SELFSERVICEPLUS_DOCUMENTS_DIR", str(settings.documents_dir))
    monkeypatch.setenv("SELFSERVICEPLUS_MANAGED_PREFIX", "SSP_TEST_")
    monkeypatch.delenv("SELFSERVICEPLUS_LOG_FILE", raising=False)


def test_no_action_prints_help(capsys):
    assert main([]) == 0
    assert "SelfService+ Settings Diagnostics" in capsys.readouterr().out


def test_check_file(write_document, tmp_path, capsys):
    good = write_document({"BrandingName": "Acme", "EnableBetaFeatures": True})
    assert main(["--check-file", str(good)]) == 0
    assert "Configuration valid" in capsys.readouterr().out

    bad = write_document("[1, 2]", tmp_path / "bad.json")
    assert main(["--check-file", str(bad)]) == 1
    assert "Configuration data is invalid or corrupted" in capsys.readouterr().out

    assert main(["--check-file", str(tmp_path / "missing.json")]) == 1
    assert "Configuration file not found at" in capsys.readouterr().out


def test_get_catalogue_key(write_document, capsys):
    write_document({"AutoLogoutTimeInterval": 900})
    assert main(["--get", "AutoLogoutTimeInterval"]) == 0
    assert "AutoLogoutTimeInterval = 900.0 [json]" in capsys.readouterr().out


def test_get_managed_value_with_type(monkeypatch, capsys):
    monkeypatch.setenv("SSP_TEST_CustomFlag", "true")
    assert main(["--get", "CustomFlag", "--type", "bool"]) == 0
    assert "CustomFlag = true [managed]" in capsys.readouterr().out

    assert main(["--get", "CustomFlag", "--type", "date"]) == 2
    assert "Unsupported value type" in capsys.readouterr().out


def test_get_with_explicit_config_file(write_document, tmp_path, capsys):
    path = write_document({"BrandingName": "Explicit"}, tmp_path / "explicit.json")
    assert main(["--config-file", str(path), "--get", "BrandingName"]) == 0
    assert 'BrandingName = "Explicit" [json]' in capsys.readouterr().out


def test_describe(capsys):
    assert main(["--describe", "RequirePasswordOnLogin"]) == 0
    out = capsys.readouterr().out
    assert "Type: bool" in out
    assert "Default: true" in out

    assert main(["--describe", "NonExistentKey"]) == 1
    assert "Configuration key not found: NonExistentKey" in capsys.readouterr().out


def test_status_and_show(write_document, capsys):
    write_document({"BrandingName": "Acme"})
    assert main(["--status", "--show"]) == 0
    out = capsys.readouterr().out

    assert "appGroup: unavailable" in out
    assert "json: available" in out
    assert '"Acme"  [json]' in out
    assert "[default]" in out


def test_report(write_document, tmp_path, capsys):
    write_document({"EnableAdvancedFeatures": True})
    report_path = tmp_path / "report.yaml"

    assert main(["--report", str(report_path)]) == 0
    assert "Settings report saved" in capsys.readouterr().out

    report = yaml.safe_load(report_path.read_text(encoding="utf-8"))
    assert report["settings"]["EnableAdvancedFeatures"] == {"value": True, "source": "json"}
    assert report["sources"] == {"appGroup": False, "managed": True, "json": True}
