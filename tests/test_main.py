import os

import pytest

from productosvc.main import DEFAULT_PORT, Settings, load_settings, main


def test_load_settings_defaults_port():
    settings = load_settings({"MONGO_URI": "mongodb://localhost", "DB_NAME": "tienda"})

    assert settings == Settings(
        port=DEFAULT_PORT, mongo_uri="mongodb://localhost", db_name="tienda"
    )
    assert settings.port == 8084


def test_load_settings_reads_port():
    settings = load_settings(
        {"PORT": "9000", "MONGO_URI": "mongodb://localhost", "DB_NAME": "tienda"}
    )

    assert settings.port == 9000


def test_load_settings_empty_port_uses_default():
    settings = load_settings(
        {"PORT": "", "MONGO_URI": "mongodb://localhost", "DB_NAME": "tienda"}
    )

    assert settings.port == DEFAULT_PORT


def test_load_settings_missing_mongo_uri():
    with pytest.raises(ValueError, match="MONGO_URI"):
        load_settings({"DB_NAME": "tienda"})


def test_load_settings_missing_db_name():
    with pytest.raises(ValueError, match="DB_NAME"):
        load_settings({"MONGO_URI": "mongodb://localhost"})


def test_load_settings_bad_port():
    with pytest.raises(ValueError, match="PORT"):
        load_settings({"PORT": "abc", "MONGO_URI": "m", "DB_NAME": "d"})


def test_main_fails_without_configuration(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(os, "environ", {})

    assert main() == 1


def test_main_loads_dotenv_and_fails_without_db_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("MONGO_URI=mongodb://localhost\n")
    fake_environ: dict[str, str] = {}
    monkeypatch.setattr(os, "environ", fake_environ)

    assert main() == 1
    assert fake_environ["MONGO_URI"] == "mongodb://localhost"