import pytest
import yaml

from bookshop_api.config import Configs, DatabaseConfig, get_configs


def _write(directory, name, text):
    path = directory / f"{name}.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_database_section(tmp_path):
    _write(
        tmp_path,
        "test",
        "database:\n  dialect: mysql\n  datasource: sqlite:///app.db\n",
    )
    configs = get_configs(env="test", directory=tmp_path)
    assert configs == Configs(
        database=DatabaseConfig(dialect="mysql", data_source="sqlite:///app.db")
    )


def test_env_defaults_to_environment_variable(tmp_path, monkeypatch):
    _write(tmp_path, "staging", "database:\n  dialect: sqlite\n  datasource: sqlite://\n")
    monkeypatch.setenv("ENV_GO", "staging")
    configs = get_configs(directory=tmp_path)
    assert configs.database.dialect == "sqlite"
    assert configs.database.data_source == "sqlite://"


def test_directory_defaults_to_config_folder(tmp_path, monkeypatch):
    folder = tmp_path / "config"
    folder.mkdir()
    _write(folder, "dev", "database:\n  datasource: sqlite://\n")
    monkeypatch.chdir(tmp_path)
    configs = get_configs(env="dev")
    assert configs.database.data_source == "sqlite://"


def test_missing_keys_give_empty_values(tmp_path):
    _write(tmp_path, "partial", "database:\n  dialect: mysql\n")
    configs = get_configs(env="partial", directory=tmp_path)
    assert configs.database.dialect == "mysql"
    assert configs.database.data_source == ""


def test_empty_file_gives_default_configs(tmp_path):
    _write(tmp_path, "empty", "")
    assert get_configs(env="empty", directory=tmp_path) == Configs()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_configs(env="absent", directory=tmp_path)


def test_invalid_yaml_raises(tmp_path):
    _write(tmp_path, "broken", "database: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        get_configs(env="broken", directory=tmp_path)


@pytest.mark.parametrize(
    "text",
    ["- a\n- b\n", "database: just-a-string\n", "database:\n  dialect: [1, 2]\n"],
)
def test_wrong_shape_raises(tmp_path, text):
    _write(tmp_path, "shape", text)
    with pytest.raises(ValueError):
        get_configs(env="shape", directory=tmp_path)