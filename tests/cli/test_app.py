"""Tests for the tagpages command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tagpages.cli.app import app

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("clean_env")


def test_build_writes_paginated_pages(site_dir: Path):
    result = runner.invoke(app, ["build", str(site_dir)])

    assert result.exit_code == 0, result.output
    assert "Wrote 5 pages for 3 tags" in result.output
    tag_root = site_dir / "_site" / "tag"
    assert (tag_root / "jekyll" / "index.html").is_file()
    assert (tag_root / "jekyll" / "page2.html").is_file()
    assert (tag_root / "jekyll" / "page3.html").is_file()
    assert (tag_root / "Tag+Pages+Plugin" / "index.html").is_file()
    assert (tag_root / "%E5%A5%BD%E7%9A%84%E4%B8%BB%E6%84%8F" / "index.html").is_file()
    index = (tag_root / "jekyll" / "index.html").read_text(encoding="utf-8")
    assert index.startswith("<!DOCTYPE html>")
    assert "<title>jekyll | Tag Pages Test Site</title>" in index


def test_build_without_pagination(site_dir: Path, tmp_path: Path):
    out = tmp_path / "out"

    result = runner.invoke(app, ["build", str(site_dir), "--no-paginate", "--output-dir", str(out)])

    assert result.exit_code == 0, result.output
    assert "Wrote 3 pages for 3 tags" in result.output
    assert not (out / "tag" / "jekyll" / "page2.html").exists()
    assert (out / "tag" / "jekyll" / "index.html").read_text(encoding="utf-8").count("<li>") == 5


def test_build_per_page_option(site_dir: Path):
    result = runner.invoke(app, ["build", str(site_dir), "--per-page", "1"])

    assert result.exit_code == 0, result.output
    assert "Wrote 8 pages for 3 tags" in result.output
    assert (site_dir / "_site" / "tag" / "jekyll" / "page5.html").is_file()


def test_zero_page_size_fails_before_writing(site_dir: Path):
    (site_dir / "_config.yml").write_text("paginate: 0\n")

    result = runner.invoke(app, ["build", str(site_dir)])

    assert result.exit_code == 1
    assert "Per-page size must be positive" in result.output
    assert not (site_dir / "_site").exists()


def test_build_reports_write_errors(site_dir: Path, mocker):
    mocker.patch("tagpages.cli.app.SiteOutputSink.publish", side_effect=PermissionError("read-only site"))

    result = runner.invoke(app, ["build", str(site_dir)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "read-only site" in result.output


def test_plan_lists_pages(site_dir: Path):
    result = runner.invoke(app, ["plan", str(site_dir)])

    assert result.exit_code == 0, result.output
    assert "jekyll" in result.output
    assert not (site_dir / "_site").exists()


def test_plan_without_tags(tmp_path: Path):
    result = runner.invoke(app, ["plan", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "No tags found." in result.output
