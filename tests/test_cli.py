"""Tests for the command-line harness."""

from app.cli import main


class TestCli:
    def test_runs_against_word_file(self, tmp_path, capsys):
        path = tmp_path / "words"
        path.write_text("test\nword\nhaus\n")

        exit_code = main(["--dictionary", str(path), "--quiet"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "3 words in the complete dictionary" in out
        assert "Found" in out

    def test_missing_dictionary(self, tmp_path):
        assert main(["--dictionary", str(tmp_path / "missing"), "--quiet"]) == 1
