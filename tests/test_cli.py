# tests/test_cli.py
"""
Integration tests for the command-line interface.
"""

import logging

import pytest
from solid_principles import DemoConfig, UnsupportedOperationError, list_demos
from solid_principles.cli import main, resolve_demos, run_demos


pytestmark = pytest.mark.integration


class TestRunDemos:
    """Test running demonstrations programmatically."""

    def test_selected_demos(self, capsys):
        """Test only the named demonstrations run, in the given order."""
        failures = run_demos(["dip", "ocp"])
        out = capsys.readouterr().out

        assert failures == 0
        assert out.index("(DIP) Example") < out.index("(OCP) Example")
        assert "(SRP) Example" not in out

    def test_lsp_failure_propagates(self):
        """Test the violating LSP path ends the run by default."""
        with pytest.raises(UnsupportedOperationError):
            run_demos(["lsp"])

    def test_keep_going(self, capsys):
        """Test every demonstration runs and the LSP failure is counted."""
        failures = run_demos(["all"], DemoConfig(keep_going=True))
        out = capsys.readouterr().out

        assert failures == 1
        assert "(ISP) Example" in out
        assert "(DIP) Example" in out

    def test_banner_between_demos(self, capsys):
        """Test each demonstration is preceded by the configured banner."""
        run_demos(["srp", "isp"], DemoConfig(separator="*", separator_width=5))
        assert capsys.readouterr().out.count("*****") == 2


class TestMain:
    """Test the console entry point."""

    def test_list(self, capsys):
        """Test listing demonstrations."""
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        for name in ("intro", "srp", "ocp", "lsp", "isp", "dip"):
            assert name in out

    def test_success_exit_code(self, capsys):
        """Test a clean run returns zero."""
        assert main(["intro", "dip"]) == 0
        assert "Introduction to OOP in Python" in capsys.readouterr().out

    def test_keep_going_exit_code(self, capsys):
        """Test a run with a failed demonstration returns one."""
        assert main(["--keep-going"]) == 1

    def test_unknown_demo(self, capsys):
        """Test an unknown name is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["nope"])
        assert exc_info.value.code == 2
        assert "Unknown demonstration" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "SOLID Principles v" in capsys.readouterr().out


class TestNameResolution:
    """Test how demonstration names given on the command line are resolved."""

    def test_all_is_case_insensitive(self):
        """Test ALL selects every demonstration like all."""
        assert resolve_demos(["ALL"]) == list_demos()
        assert resolve_demos([" All "]) == list_demos()

    def test_no_names_means_all(self):
        """Test an empty selection runs everything."""
        assert resolve_demos([]) == list_demos()

    def test_unknown_name_next_to_all(self):
        """Test an unknown name is reported even when all is given."""
        with pytest.raises(KeyError, match="nope"):
            resolve_demos(["all", "nope"])

    def test_unknown_name_next_to_all_is_usage_error(self, capsys):
        """Test nothing runs when all is combined with an unknown name."""
        with pytest.raises(SystemExit) as exc_info:
            main(["all", "nope"])

        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "Unknown demonstration 'nope'" in captured.err
        assert "Example" not in captured.out

    def test_upper_case_all_runs(self, capsys):
        """Test ALL is accepted by the console entry point."""
        assert main(["ALL", "--keep-going"]) == 1
        assert "(DIP) Example" in capsys.readouterr().out


class TestLogging:
    """Test diagnostic logging through the console entry point."""

    def test_verbose_shows_info(self, caplog, capsys):
        """Test --verbose surfaces INFO diagnostics from the demonstrations."""
        assert main(["-v", "ocp"]) == 0

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert "Processing with CreditCardPaymentMethod" in messages

    def test_quiet_by_default(self, caplog, capsys):
        """Test INFO diagnostics stay hidden without --verbose."""
        assert main(["ocp"]) == 0
        assert not [r for r in caplog.records if r.levelno == logging.INFO]

    def test_keep_going_logs_failure(self, caplog, capsys):
        """Test a failed demonstration is logged as an error."""
        assert main(["lsp", "--keep-going"]) == 1

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "lsp stopped on a violated contract: Penguins cannot fly" in errors[0].getMessage()
