"""Tests for the command-line entry point."""

from pathlib import Path

from iconsite.main import main, parse_args


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.root == Path.cwd()
        assert args.pages is None
        assert args.output is None
        assert args.log_level == "INFO"

    def test_overrides(self, tmp_path):
        args = parse_args(["--root", str(tmp_path), "--output", str(tmp_path / "dist")])
        assert args.root == tmp_path
        assert args.output == tmp_path / "dist"


class TestMain:
    def test_successful_build_exits_zero(self, project):
        assert main(["--root", str(project)]) == 0
        assert (project / "www" / "star.html").exists()

    def test_custom_output_directory(self, project):
        assert main(["--root", str(project), "--output", str(project / "dist")]) == 0
        assert (project / "dist" / "guide.html").exists()

    def test_failed_build_exits_non_zero(self, project, capsys):
        (project / "pages" / "[slug].mdx").unlink()
        assert main(["--root", str(project), "--log-level", "WARNING"]) == 1
        err = capsys.readouterr().err
        assert "Build failed" in err
        assert "TemplatePageError" in err

    def test_io_failure_exits_non_zero(self, tmp_path):
        assert main(["--root", str(tmp_path)]) == 1

    def test_undecodable_page_exits_non_zero(self, project, capsys):
        (project / "pages" / "latin.mdx").write_bytes(b"caf\xe9\n")
        assert main(["--root", str(project)]) == 1
        assert "Build failed" in capsys.readouterr().err
