"""Tests for the command-line entry point."""

from shamir_plots.cli import build_parser, main
from shamir_plots.config import OUTPUT_DIR_ENV


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.output_dir is None
        assert args.figures is None
        assert args.keep_going is False
        assert args.list is False

    def test_repeated_figure(self):
        args = build_parser().parse_args(["--figure", "line", "--figure", "cubic"])
        assert args.figures == ["line", "cubic"]


class TestMain:
    def test_renders_all_figures(self, tmp_path):
        output_dir = tmp_path / "out"
        assert main(["--output-dir", str(output_dir)]) == 0
        assert len(list(output_dir.glob("*.svg"))) == 6

    def test_creates_nested_output_dir(self, tmp_path):
        output_dir = tmp_path / "a" / "b"
        assert main(["--output-dir", str(output_dir), "--figure", "line"]) == 0
        assert (output_dir / "line.svg").exists()

    def test_output_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(OUTPUT_DIR_ENV, str(tmp_path / "env"))
        assert main(["--figure", "cubic"]) == 0
        assert (tmp_path / "env" / "cubic.svg").exists()

    def test_unknown_figure(self, tmp_path):
        assert main(["--output-dir", str(tmp_path), "--figure", "nope"]) == 1

    def test_list(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["--list"]) == 0
        assert list(tmp_path.iterdir()) == []

    def test_invalid_log_level(self, tmp_path):
        assert main(["--output-dir", str(tmp_path), "--log-level", "LOUD"]) == 2


class TestMainFailures:
    """A directory occupying a figure's file name makes that figure unwritable."""

    def _block(self, output_dir, name):
        output_dir.mkdir(parents=True, exist_ok=True)
        (output_dir / name).mkdir()

    def test_first_failure_exits_nonzero(self, tmp_path):
        output_dir = tmp_path / "out"
        self._block(output_dir, "quadratic.svg")
        assert main(["--output-dir", str(output_dir)]) == 1
        assert sorted(p.name for p in output_dir.glob("*.svg") if p.is_file()) == ["line.svg"]

    def test_keep_going_renders_remaining_figures(self, tmp_path):
        output_dir = tmp_path / "out"
        self._block(output_dir, "quadratic.svg")
        assert main(["--output-dir", str(output_dir), "--keep-going"]) == 1
        written = sorted(p.name for p in output_dir.glob("*.svg") if p.is_file())
        assert written == [
            "cubic.svg",
            "line.svg",
            "shamir.svg",
            "shamir_alternate_multiple.svg",
            "shamir_alternate_single.svg",
        ]
