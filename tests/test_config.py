"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mapcache.config import MapCacheConfig, load_config
from mapcache.constants.cache import VERSION_FIELD
from mapcache.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == MapCacheConfig(root=tmp_path.resolve())
    assert loaded.storage_path == tmp_path.resolve() / ".mapcache"
    assert loaded.reserved_field == VERSION_FIELD
    assert loaded.binary_file is None


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "absent.yaml")


def test_load_config_reads_all_keys(tmp_path: Path) -> None:
    (tmp_path / "mapcache.yaml").write_text(
        "\n".join(
            [
                "storage_dir: cache",
                "binary_path: /opt/host/app.bin",
                "version_file: meta/version.json",
                "version_field: versionCode",
                "reserved_field: snap_build_number",
                "engine: host_mappers:build_engine",
                "symbols_prefix: host.",
            ]
        ),
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    root = tmp_path.resolve()
    assert loaded.storage_path == root / "cache"
    assert loaded.binary_file == Path("/opt/host/app.bin")
    assert loaded.version_path == root / "meta" / "version.json"
    assert loaded.version_field == "versionCode"
    assert loaded.reserved_field == "snap_build_number"
    assert loaded.engine == "host_mappers:build_engine"
    assert loaded.symbols_prefix == "host."


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "mapcache.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == MapCacheConfig(root=tmp_path.resolve())


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        pytest.param("storage_dir: [a, b]\n", "storage_dir", id="non-string"),
        pytest.param("binary_path: ''\n", "binary_path", id="empty-string"),
        pytest.param("engine: just_a_module\n", "engine", id="engine-without-attr"),
        pytest.param("storage_dirs: cache\n", "did you mean 'storage_dir'", id="typo-suggestion"),
        pytest.param("- a\n- b\n", "YAML mapping", id="not-a-mapping"),
        pytest.param("storage_dir: [unclosed\n", "Invalid YAML", id="invalid-yaml"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "mapcache.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)
