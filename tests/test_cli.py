"""Tests for the command line interface."""

from __future__ import annotations

from tabprep import load_bundle
from tabprep.cli import main


class TestPrepareCommand:
    """Tests for `tabprep prepare`."""

    def test_prepare_writes_bundle(self, heart_csv, temp_dir, capsys):
        """prepare saves a bundle with both tasks."""
        output = temp_dir / "tasks.pkl"

        code = main(
            [
                "prepare",
                str(heart_csv),
                "-r",
                "chol",
                "-c",
                "target",
                "--categorical",
                "cp,restecg,slope,ca,thal",
                "-o",
                str(output),
            ]
        )

        assert code == 0
        assert set(load_bundle(output).tasks) == {"regression", "classification"}
        out = capsys.readouterr().out
        assert "Imputed:    oldpeak, ca, thal" in out
        assert "regression: target=chol, train=210, test=90" in out

    def test_missing_dataset(self, temp_dir, capsys):
        """A missing dataset exits with an error."""
        code = main(["prepare", str(temp_dir / "nope.csv"), "-r", "chol"])

        assert code == 1
        assert "Data file not found" in capsys.readouterr().out

    def test_requires_target(self, heart_csv, capsys):
        """At least one target must be given."""
        code = main(["prepare", str(heart_csv)])

        assert code == 1
        assert "required" in capsys.readouterr().out

    def test_reports_library_errors(self, heart_csv, temp_dir, capsys):
        """Library errors are printed rather than raised."""
        code = main(
            ["prepare", str(heart_csv), "-r", "nonexistent", "-o", str(temp_dir / "t.pkl")]
        )

        assert code == 1
        assert "nonexistent" in capsys.readouterr().out


class TestInfoCommand:
    """Tests for `tabprep info`."""

    def test_info(self, heart_csv, temp_dir, capsys):
        """info prints each task of a saved bundle."""
        output = temp_dir / "tasks.pkl"
        main(["prepare", str(heart_csv), "-c", "target", "-o", str(output)])
        capsys.readouterr()

        code = main(["info", str(output)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Task: classification" in out
        assert "Target:       target" in out

    def test_info_missing_bundle(self, temp_dir, capsys):
        """A missing bundle exits with an error."""
        code = main(["info", str(temp_dir / "nope.pkl")])

        assert code == 1
        assert "Task bundle not found" in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Running without a command prints help and fails."""
        assert main([]) == 1
