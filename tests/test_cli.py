"""Tests for the command line entry point."""
import json

from hostcheck.cli import main
from hostcheck.config import settings


def _write_config(tmp_path, present, absent):
    config = tmp_path / "checks.toml"
    config.write_text(f"""
[[check]]
message = "Marker file present"
points = 4
  [[check.pass]]
  type = "PathExists"
  path = "{present}"

[[check]]
message = "Stale file removed"
hint = "Delete it"
points = 6
  [[check.pass]]
  type = "PathExistsNot"
  path = "{present}"

[[check]]
message = "Unrelated file absent"
points = 2
  [[check.pass]]
  type = "PathExistsNot"
  path = "{absent}"
""")
    return config


class TestMain:

    def test_text_summary(self, tmp_path, capsys):
        present = tmp_path / "marker"
        present.write_text("")
        config = _write_config(tmp_path, present, tmp_path / "absent")

        assert main([str(config)]) == 0
        out = capsys.readouterr().out
        assert "[PASS] Marker file present (4 pts)" in out
        assert "[FAIL] Stale file removed (6 pts)" in out
        assert "hint: Delete it" in out
        assert "2/3 checks passed, 6/12 points" in out

    def test_json_report(self, tmp_path, capsys):
        present = tmp_path / "marker"
        present.write_text("")
        config = _write_config(tmp_path, present, tmp_path / "absent")

        assert main([str(config), "--json"]) == 0
        out = capsys.readouterr().out
        report = json.loads(out[out.index("{"):])
        assert report["earned_points"] == 6
        assert report["total_points"] == 12
        assert [r["passed"] for r in report["results"]] == [True, False, True]

    def test_configuration_error_exits_1(self, tmp_path, capsys):
        config = tmp_path / "checks.toml"
        config.write_text("""
[[check]]
message = "Bad type"
points = 1
  [[check.pass]]
  type = "PathExistz"
  path = "/"
""")
        assert main([str(config)]) == 1
        assert "Check type does not exist: PathExistz" in capsys.readouterr().err

    def test_plain_values_scored_with_obfuscation_key(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(settings, "OBFUSCATION_KEY", "s3cret")
        present = tmp_path / "marker"
        present.write_text("abcd\n")
        config = tmp_path / "checks.toml"
        config.write_text(f"""
[[check]]
message = "Marker file present"
points = 4
  [[check.pass]]
  type = "PathExists"
  path = "{present}"

[[check]]
message = "Marker holds abcd"
points = 6
  [[check.pass]]
  type = "FileContains"
  path = "{present}"
  value = "abcd"
""")

        assert main([str(config)]) == 0
        out = capsys.readouterr().out
        assert "[PASS] Marker file present (4 pts)" in out
        assert "[PASS] Marker holds abcd (6 pts)" in out
        assert "2/2 checks passed, 10/10 points" in out
