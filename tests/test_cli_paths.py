"""
Tests for CLI output path resolution.
"""

from pathlib import Path

from statewalk.cli.paths import resolve_run_path


class TestResolveRunPath:
    def test_bare_name_goes_to_runs(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        resolved = resolve_run_path("queens")

        assert resolved == str(Path.cwd() / "outputs" / "runs" / "queens.yaml")
        assert (Path.cwd() / "outputs" / "runs").is_dir()

    def test_extension_kept(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert resolve_run_path("queens.yaml").endswith("queens.yaml")
        assert not resolve_run_path("queens.yaml").endswith(".yaml.yaml")

    def test_explicit_directory(self):
        assert resolve_run_path("results/queens") == str(Path("results") / "queens.yaml")
