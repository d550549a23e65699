"""Tests for the cssguard CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cssguard import __version__
from cssguard.cli.main import cli


@pytest.fixture
def dist(tmp_path):
    root = tmp_path / "dist"
    (root / "stats").mkdir(parents=True)
    bundles = {"utilities": [".m-0", ".p-1"], "base": ["body", ".m-0"]}
    meta = {"bundles": {name: {} for name in bundles}}
    (root / "meta.json").write_text(json.dumps(meta), encoding="utf-8")
    for name, selectors in bundles.items():
        stats = {"selectors": {"values": selectors}}
        (root / "stats" / f"{name}.json").write_text(json.dumps(stats), encoding="utf-8")
    return root


def _css(tmp_path, text: str, name: str = "app.css"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "bundles" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_violation_exits_1(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".card { color: red; }\n.card .m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(dist)])
        assert result.exit_code == 1
        assert f"{css}:2:1: ERROR:" in result.output
        assert '".m-0" should not be overridden in ".card .m-0" (found in utilities).' in result.output
        assert "Summary: 1 violation(s) in 1 file(s)" in result.output

    def test_clean_file_exits_0(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".card { color: red; }\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(dist)])
        assert result.exit_code == 0
        assert "Summary: 0 violation(s)" in result.output

    def test_bundle_option(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--bundle", "base"]
        )
        assert result.exit_code == 1
        assert "(found in base)" in result.output

    def test_unknown_bundle_warns(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".p-1 { padding: 0; }\n")
        result = CliRunner().invoke(
            cli,
            ["check", str(css), "--bundle-dir", str(dist), "--bundle", "utilities", "--bundle", "nope"],
        )
        assert result.exit_code == 1
        assert 'Warning: The "bundles" option must be a list of valid bundles; got: "nope"' in result.output

    def test_ignore_option_regex(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--ignore", "/^\\.m-/"]
        )
        assert result.exit_code == 0

    def test_config_file(self, tmp_path, dist) -> None:
        config = tmp_path / "cssguard.json"
        config.write_text(json.dumps({"ignoreSelectors": [".p-"]}), encoding="utf-8")
        css = _css(tmp_path, ".p-1 { padding: 0; }\n.m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--config", str(config)]
        )
        assert result.exit_code == 1
        assert '".p-1"' not in result.output
        assert '".m-0" should not be overridden' in result.output

    def test_multiple_files(self, tmp_path, dist) -> None:
        a = _css(tmp_path, ".m-0 { margin: 2px; }\n", "a.css")
        b = _css(tmp_path, ".p-1 { padding: 1px; }\n", "b.css")
        result = CliRunner().invoke(cli, ["check", str(a), str(b), "--bundle-dir", str(dist)])
        assert result.exit_code == 1
        assert "Summary: 2 violation(s) in 2 file(s)" in result.output

    def test_parse_error_exits_2(self, tmp_path, dist) -> None:
        css = _css(tmp_path, ".m-0 { margin: 2px;\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(dist)])
        assert result.exit_code == 2
        assert "Parse error" in result.output

    def test_bad_config_exits_2(self, tmp_path, dist) -> None:
        config = tmp_path / "cssguard.json"
        config.write_text("{", encoding="utf-8")
        css = _css(tmp_path, ".a {}\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--config", str(config)]
        )
        assert result.exit_code == 2
        assert "Config error" in result.output

    def test_bad_bundle_dir_exits_2(self, tmp_path) -> None:
        css = _css(tmp_path, ".a {}\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(tmp_path)])
        assert result.exit_code == 2
        assert "Bundle data error" in result.output


# ---------------------------------------------------------------------------
# bundles command
# ---------------------------------------------------------------------------


class TestBundlesCommand:
    def test_lists_bundles_with_counts(self, dist) -> None:
        result = CliRunner().invoke(cli, ["bundles", "--bundle-dir", str(dist)])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].split() == ["base", "2", "selector(s)"]
        assert lines[1].split() == ["utilities", "2", "selector(s)"]

    def test_missing_meta(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["bundles", "--bundle-dir", str(tmp_path)])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestCheckMalformedInput:
    def test_non_string_bundle_in_config_warns(self, tmp_path, dist) -> None:
        config = tmp_path / "cssguard.json"
        config.write_text(json.dumps({"bundles": ["utilities", ["x"]]}), encoding="utf-8")
        css = _css(tmp_path, ".m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--config", str(config)]
        )
        assert result.exit_code == 1
        assert "Warning: The \"bundles\" option must be a list of valid bundles; got: \"['x']\"" in result.output
        assert "(found in utilities)" in result.output

    def test_non_utf8_stylesheet_exits_2(self, tmp_path, dist) -> None:
        css = tmp_path / "app.css"
        css.write_bytes(b".m-0 { content: '\xff'; }\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(dist)])
        assert result.exit_code == 2
        assert "Parse error" in result.output
        assert "not valid UTF-8" in result.output

    def test_non_utf8_config_exits_2(self, tmp_path, dist) -> None:
        config = tmp_path / "cssguard.json"
        config.write_bytes(b'{"bundles": ["\xff"]}')
        css = _css(tmp_path, ".a {}\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--config", str(config)]
        )
        assert result.exit_code == 2
        assert "Config error" in result.output

    def test_non_utf8_stats_exits_2(self, tmp_path, dist) -> None:
        (dist / "stats" / "utilities.json").write_bytes(b'{"selectors": {"values": ["\xff"]}}')
        css = _css(tmp_path, ".a {}\n")
        result = CliRunner().invoke(cli, ["check", str(css), "--bundle-dir", str(dist)])
        assert result.exit_code == 2
        assert "Bundle data error" in result.output


class TestCheckConfigEnabled:
    def test_help_says_enabled_is_ignored(self) -> None:
        result = CliRunner().invoke(cli, ["check", "--help"])
        assert result.exit_code == 0
        assert "ignored" in result.output

    def test_enabled_false_in_config_still_checks(self, tmp_path, dist) -> None:
        config = tmp_path / "cssguard.json"
        config.write_text(json.dumps({"enabled": False}), encoding="utf-8")
        css = _css(tmp_path, ".m-0 { margin: 2px; }\n")
        result = CliRunner().invoke(
            cli, ["check", str(css), "--bundle-dir", str(dist), "--config", str(config)]
        )
        assert result.exit_code == 1
        assert '".m-0" should not be overridden' in result.output
