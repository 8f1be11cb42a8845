"""
Smoke tests for the demo narration.
"""
import pytest
from structlog.testing import capture_logs

from restaurant_dip import main as demo
from restaurant_dip.application.models import RestaurantConfig


@pytest.fixture
def logging_calls(monkeypatch):
    """Replace logging setup so the demo does not reconfigure structlog."""
    calls = []
    monkeypatch.setattr(demo, "configure_logging", lambda *args: calls.append(args))
    return calls


class TestDemo:
    """Test cases for the demo entry point."""

    def test_main_runs_every_section(self, logging_calls, capsys):
        """Test a full run with the default configuration."""
        exit_code = demo.main(RestaurantConfig())

        out = capsys.readouterr().out
        assert exit_code == 0
        assert logging_calls == [("INFO", False)]
        for heading in (
            "PROBLEM: DIP violation",
            "SOLUTION 1: Dependency injection",
            "SOLUTION 2: Factory pattern",
            "SOLUTION 3: Strategy pattern",
            "TESTING: Easy mocking with DIP",
            "BONUS: Wiring from configuration",
            "BENEFITS SUMMARY",
            "DEMO COMPLETED",
        ):
            assert heading in out

    def test_factory_section_reports_configurations(self, capsys):
        """Test the configuration labels printed by the factory section."""
        demo.demonstrate_factory_pattern()

        out = capsys.readouterr().out
        assert "Configuration: MongoDB + Slack" in out
        assert "Configuration: PostgreSQL + Email" in out

    def test_strategy_section_reports_outcomes(self, capsys):
        """Test the payment outcomes printed by the strategy section."""
        demo.demonstrate_strategy_pattern()

        out = capsys.readouterr().out
        assert "Credit Card: paid" in out
        assert "Digital Wallet: paid" in out
        assert "Cash: paid" in out

    def test_testing_section_records_calls(self, capsys):
        """Test the recorded call order printed by the testing section."""
        demo.demonstrate_testing()

        assert "Recorded calls: ['save', 'send']" in capsys.readouterr().out

    def test_container_section_uses_configuration(self, capsys):
        """Test the configuration-driven section."""
        demo.demonstrate_container(RestaurantConfig(database_type="mongodb", payment_type="cash"))

        out = capsys.readouterr().out
        assert "Configuration: MongoDB + Email / Cash" in out
        assert "Payment strategy in use: Cash" in out

    def test_main_reports_bad_configuration(self, logging_calls):
        """Test that an unknown key aborts the demo with a failing exit code."""
        assert demo.main(RestaurantConfig(database_type="oracle")) == 1

    def test_main_reports_invalid_environment(self, logging_calls, monkeypatch):
        """Test that an invalid RESTAURANT_* value is reported, not raised."""
        monkeypatch.setenv("RESTAURANT_LOG_LEVEL", "verbose")

        with capture_logs() as logs:
            exit_code = demo.main()

        assert exit_code == 1
        assert logging_calls == []
        assert logs[-1]["event"] == "Invalid configuration"
        assert logs[-1]["log_level"] == "error"
        assert logs[-1]["fields"] == ["log_level"]
