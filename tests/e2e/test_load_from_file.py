"""End-to-end coverage of extension routing with the sample files in ``tests/data``."""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_typed_config import Config, InvalidFormat, NotFound, UnsupportedFormat, file_extension, resolve_format

SAMPLE_FILES = ["config.toml", "config.ini", "config.json"]


class AppConfig(Config):
    debug = False


@pytest.mark.parametrize("name", SAMPLE_FILES)
def test_load_from_file_honours_overwrite(name: str, data_dir: Path) -> None:
    config = AppConfig()
    assert config.debug is False

    config.load_from_file(data_dir / name)
    assert config.debug is False
    assert config.dbPort == 5432

    config.load_from_file(data_dir / name, overwrite=True)
    assert config.debug is True


@pytest.mark.parametrize("name", SAMPLE_FILES)
def test_all_formats_agree(name: str, data_dir: Path) -> None:
    config = Config()
    config.load_from_file(str(data_dir / name))
    assert config.as_dict() == {"debug": True, "dbHost": "db.internal", "dbPort": 5432, "tags": ["alpha", "beta"]}


def test_load_from_file_not_supported(data_dir: Path) -> None:
    config = AppConfig()
    with pytest.raises(UnsupportedFormat):
        config.load_from_file(data_dir / "config.none")
    assert dict(config) == {"debug": False}


@pytest.mark.parametrize("name", ["config.php", "config.JSON", "config.yaml", "config"])
def test_unrecognised_extensions(name: str, data_dir: Path) -> None:
    with pytest.raises(UnsupportedFormat):
        Config().load_from_file(data_dir / name)


@pytest.mark.parametrize("name", ["absent.toml", "absent.ini", "absent.cfg", "absent.json", "absent.js", ".env"])
def test_load_from_file_missing(name: str, tmp_path: Path) -> None:
    with pytest.raises(NotFound):
        Config().load_from_file(tmp_path / name)


@pytest.mark.parametrize(
    ("loader", "name"),
    [
        ("load_from_ini", "config.json"),
        ("load_from_json", "config.ini"),
        ("load_from_json", "config.toml"),
        ("load_from_native", "config.json"),
        ("load_from_toml", "config.ini"),
    ],
)
def test_wrong_content_is_invalid(loader: str, name: str, data_dir: Path) -> None:
    config = AppConfig()
    with pytest.raises(InvalidFormat):
        getattr(config, loader)(data_dir / name, overwrite=True)
    assert dict(config) == {"debug": False}


def test_format_specific_loaders_ignore_extension(data_dir: Path, tmp_path: Path) -> None:
    renamed = tmp_path / "settings.txt"
    renamed.write_bytes((data_dir / "config.ini").read_bytes())
    config = Config()
    config.load_from_ini(renamed)
    assert config.dbHost == "db.internal"


def test_layered_loads_fill_gaps_in_order(data_dir: Path, tmp_path: Path) -> None:
    override = tmp_path / "local.env"
    override.write_text("DB_HOST = localhost\ncache.ttl = 60\n", encoding="utf-8")
    config = Config()
    config.load_from_file(override)
    config.load_from_file(data_dir / "config.json")
    assert config.dbHost == "localhost"
    assert config.cacheTtl == 60
    assert config.dbPort == 5432
    assert config.count() == 5


def test_slice_after_file_load(data_dir: Path) -> None:
    config = AppConfig()
    config.load_from_file(data_dir / "config.toml")
    database = config.get_slice("db")
    assert dict(database) == {"host": "db.internal", "port": 5432}


@pytest.mark.parametrize(
    ("path", "group"),
    [
        ("a/b/config.toml", "native"),
        ("app.ini", "ini"),
        ("app.cfg", "ini"),
        ("app.config", "ini"),
        (".env", "ini"),
        ("archive.tar.json", "json"),
        ("app.jsn", "json"),
        ("app.js", "json"),
    ],
)
def test_resolve_format(path: str, group: str) -> None:
    assert resolve_format(path) == group


def test_extension_uses_file_name_only() -> None:
    assert file_extension("conf.d/settings") == ""
    assert file_extension(Path("dir.json") / "file") == ""
