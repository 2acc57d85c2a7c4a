"""Tests for PolarsConfig loading and PolarStore.from_config."""

import pytest
import yaml

from polar_config import ConfigError, PolarsConfig, load_config, save_config
from polar_store import PolarStore


class TestLoadConfig:
    def test_reads_camel_case_keys(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text("polarsDir: /data/polars\narchivedDir: /data/archived\n")
        c = load_config(fp)
        assert c.polars_dir == "/data/polars"
        assert c.archived_dir == "/data/archived"

    def test_missing_file_writes_defaults(self, tmp_path):
        fp = tmp_path / "conf" / "config.yaml"
        c = load_config(fp)
        assert fp.exists()
        data = yaml.safe_load(fp.read_text())
        assert data == {"polarsDir": c.polars_dir, "archivedDir": c.archived_dir}

    def test_partial_file_uses_defaults(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text("polarsDir: /only/this\n")
        c = load_config(fp)
        assert c.polars_dir == "/only/this"
        assert c.archived_dir == PolarsConfig().archived_dir

    def test_empty_file_uses_defaults(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text("")
        assert load_config(fp) == PolarsConfig()

    @pytest.mark.parametrize("text", ["polarsDir: [unclosed", "- a\n- b\n", "polarsDir: {a: 1}\n"])
    def test_invalid_file(self, tmp_path, text):
        fp = tmp_path / "config.yaml"
        fp.write_text(text)
        with pytest.raises(ConfigError):
            load_config(fp)

    def test_save_then_load(self, tmp_path):
        fp = tmp_path / "config.yaml"
        save_config(PolarsConfig(polars_dir="p", archived_dir="a"), fp)
        assert load_config(fp) == PolarsConfig(polars_dir="p", archived_dir="a")


class TestStoreFromConfig:
    def test_builds_store(self, tmp_path):
        c = PolarsConfig(polars_dir=str(tmp_path / "p"), archived_dir=str(tmp_path / "a"))
        store = PolarStore.from_config(c)
        assert store.polars_dir == tmp_path / "p"
        assert store.archived_dir.is_dir()
