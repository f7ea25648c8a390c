"""
Tests for the command line interface and its settings.
"""

import argparse
import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from benchsets.frontend import main, parse_map, parse_mod
from benchsets.infra.config import Settings, load_settings
from benchsets.core.procedures import read_benchmark_set, read_meta


@pytest.fixture
def procedure_file(tmp_path) -> Path:
    return tmp_path / "procedures.json"


def run(procedure_file: Path, *args: str) -> int:
    return main(["--file", str(procedure_file), *args])


class TestCommands:
    def test_add_set_and_show(self, procedure_file, capsys):
        code = run(
            procedure_file, "add-set", "belts",
            "--ticks", "1000", "--runs", "3",
            "--mod", "bobs:1.0:abc",
            "--map", "saves/belts.zip:def:https://example.com/belts.zip",
        )
        assert code == 0

        stored = read_benchmark_set("belts", procedure_file)
        assert stored.ticks == 1000
        assert next(iter(stored.maps)).download_link == "https://example.com/belts.zip"

        capsys.readouterr()
        assert run(procedure_file, "show", "belts") == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["mods"] == [{"name": "bobs", "version": "1.0", "sha1": "abc"}]
        assert "save_subdirectory" not in shown

    def test_add_set_twice_needs_force(self, procedure_file, capsys):
        assert run(procedure_file, "add-set", "a", "--ticks", "1", "--runs", "1") == 0
        assert run(procedure_file, "add-set", "a", "--ticks", "2", "--runs", "1") == 1
        assert "already exists" in capsys.readouterr().err
        assert run(procedure_file, "add-set", "a", "--ticks", "2", "--runs", "1", "--force") == 0
        assert read_benchmark_set("a", procedure_file).ticks == 2

    def test_add_meta_and_resolve(self, procedure_file, capsys):
        run(procedure_file, "add-set", "x", "--ticks", "1", "--runs", "1")
        run(procedure_file, "add-set", "y", "--ticks", "1", "--runs", "1")
        run(procedure_file, "add-meta", "inner", "y")
        run(procedure_file, "add-meta", "outer", "inner", "x")
        assert read_meta("outer", procedure_file) == {"inner", "x"}
        capsys.readouterr()

        assert run(procedure_file, "resolve", "outer") == 0
        assert capsys.readouterr().out.split() == ["x", "y"]

        assert run(procedure_file, "resolve", "outer", "--metas") == 0
        assert capsys.readouterr().out.split() == ["inner", "outer"]

    def test_list(self, procedure_file, capsys):
        run(procedure_file, "add-set", "x", "--ticks", "1", "--runs", "1")
        run(procedure_file, "add-meta", "all", "x")
        capsys.readouterr()

        assert run(procedure_file, "list", "--kind", "meta") == 0
        out = capsys.readouterr().out
        assert "Meta Sets:" in out
        assert "Benchmark Sets:" not in out

    def test_missing_file(self, procedure_file, capsys):
        assert run(procedure_file, "resolve", "all") == 1
        assert run(procedure_file, "show", "x") == 1
        assert run(procedure_file, "meta", "all") == 1

    def test_malformed_file(self, procedure_file):
        procedure_file.write_text("{")
        assert run(procedure_file, "list") == 2

    def test_negative_ticks_rejected(self, procedure_file):
        with pytest.raises(SystemExit):
            run(procedure_file, "add-set", "a", "--ticks", "-1", "--runs", "1")


class TestArgumentParsing:
    def test_parse_mod(self):
        mod = parse_mod("bobs:1.0:abc")
        assert (mod.name, mod.version, mod.sha1) == ("bobs", "1.0", "abc")

    def test_parse_map_keeps_url_colons(self):
        map_ = parse_map("saves/m.zip:ff:https://host:8080/m.zip")
        assert map_.name == "m.zip"
        assert map_.download_link == "https://host:8080/m.zip"

    def test_parse_mod_rejects_bad_value(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_mod("only-a-name")


class TestSettings:
    def test_from_yaml(self):
        settings = Settings.from_yaml({"procedure_file": "bench/procs.json", "verbose": True})
        assert settings.procedure_file == Path("bench/procs.json")
        assert settings.verbose

    def test_from_empty_yaml(self):
        assert Settings.from_yaml(None).verbose is False

    def test_load_settings(self, tmp_path):
        config = tmp_path / "settings.yml"
        config.write_text("procedure_file: other.json\n")
        assert load_settings(config).procedure_file == Path("other.json")

    def test_load_missing_settings(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yml")

    def test_config_file_used_by_cli(self, tmp_path, capsys):
        procedure_file = tmp_path / "from_config.json"
        config = tmp_path / "settings.yml"
        config.write_text(f"procedure_file: {procedure_file}\n")

        assert main(["--config", str(config), "add-meta", "all", "x"]) == 0
        assert read_meta("all", procedure_file) == {"x"}
