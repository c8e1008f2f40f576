# File: tests/test_cli.py
"""Тесты для CLI (`url_scout.cli`) с использованием click.testing.CliRunner.
Проверяют команды `extract`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
from click.testing import CliRunner

from url_scout.cli import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "UrlScout" in result.output


def test_show_default_config(runner):
    result = runner.invoke(cli, ["config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["home_url"] is None
    assert data["attribute_filter"] == ["src", "href", "content", "poster"]


def test_show_config_from_file(runner, tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("home_url: https://home.example/\nfiles_only: true\n", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["home_url"] == "https://home.example"
    assert data["files_only"] is True


def test_bad_config_file(runner, tmp_path):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"home_url": "www.bad-url.com"}), encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1


def test_extract_stdout(runner, page_file):
    result = runner.invoke(cli, ["extract", str(page_file), "--home-url", "https://home.example"])
    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output[0] == {
        "attribute": "content",
        "value": "https://www.home.example/og.JPG",
        "url": "https://www.home.example/og.JPG",
    }
    assert len(output) == 7


def test_extract_without_home_url_has_no_url_key(runner, page_file):
    result = runner.invoke(cli, ["extract", str(page_file)])
    assert result.exit_code == 0
    output = json.loads(result.output)
    assert len(output) == 10
    assert all("url" not in item for item in output)


def test_extract_from_stdin_absolute(runner):
    html = '<img src="/a.png"><a href="http://other.example/x"><script src="//cdn.example/y.js"></script>'
    result = runner.invoke(
        cli,
        ["extract", "-", "--home-url", "http://home.example", "--absolute"],
        input=html,
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == ["http://home.example/a.png"]


def test_extract_options_override_config(runner, tmp_path, page_file):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(
        "home_url: https://home.example\nignored_extensions: [css]\n", encoding="utf-8"
    )
    result = runner.invoke(
        cli,
        [
            "--config", str(cfg_file),
            "extract", str(page_file),
            "--files-only",
            "--alternate-domain", r"/.*\.cdn\.example/",
            "--ignore-ext", "js",
            "--absolute",
        ],
    )
    assert result.exit_code == 0
    # --ignore-ext replaces the list from the file, so css is back
    assert result.output.splitlines() == [
        "https://www.home.example/og.JPG",
        "https://home.example/static/site.css",
        "https://home.example/docs/guide.pdf?download=1#top",
        "https://assets.cdn.example/img/logo.png",
        "https://home.example/media/poster.webp",
    ]


def test_extract_attribute_option(runner, page_file):
    result = runner.invoke(cli, ["extract", str(page_file), "-a", "poster", "--pretty"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [{"attribute": "poster", "value": "/media/poster.webp"}]


def test_extract_bad_home_url(runner, page_file):
    result = runner.invoke(cli, ["extract", str(page_file), "--home-url", "www.bad-url.com"])
    assert result.exit_code == 1


def test_extract_json_and_html_files(runner, tmp_path, page_file):
    json_out = tmp_path / "out" / "urls.json"
    html_out = tmp_path / "out" / "urls.html"
    result = runner.invoke(
        cli,
        [
            "extract", str(page_file),
            "--home-url", "https://home.example",
            "--json", str(json_out),
            "--html", str(html_out),
        ],
    )
    assert result.exit_code == 0
    assert "JSON report" in result.output
    assert "HTML report" in result.output
    data = json.loads(json_out.read_text(encoding="utf-8"))
    assert data[1]["url"] == "https://home.example/static/site.css"
    assert "https://home.example/static/site.css" in html_out.read_text(encoding="utf-8")


def test_extract_latin1_page(runner, tmp_path):
    page = tmp_path / "latin1.html"
    page.write_bytes(b'<meta charset="latin-1"><p>caf\xe9</p><img src="/a.png">')
    result = runner.invoke(
        cli, ["extract", str(page), "--home-url", "http://home.example", "--absolute"]
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == ["http://home.example/a.png"]
