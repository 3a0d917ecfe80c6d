"""Tests for settings loading."""

from ledger_reporting.config import LedgerReportingSettings, load_settings


class TestSettings:
    """Tests for LedgerReportingSettings."""

    def test_defaults(self, settings):
        assert settings.default_network == "public"
        assert settings.report.operations_window == 200
        assert settings.report.recent_transactions == 5
        assert settings.horizon.request_timeout == 10

    def test_resolve_known_networks(self, settings):
        assert settings.resolve_horizon_url("public") == "https://horizon.stellar.org"
        assert (
            settings.resolve_horizon_url("testnet")
            == "https://horizon-testnet.stellar.org"
        )
        assert settings.resolve_horizon_url() == "https://horizon.stellar.org"

    def test_custom_network_is_a_url(self, settings):
        assert (
            settings.resolve_horizon_url("http://localhost:8000")
            == "http://localhost:8000"
        )

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_REPORTING_DEFAULT_NETWORK", "testnet")
        assert LedgerReportingSettings().default_network == "testnet"

    def test_from_yaml(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text(
            "default_network: testnet\n"
            "log_level: DEBUG\n"
            "horizon:\n"
            "  testnet_url: http://localhost:8000\n"
            "report:\n"
            "  operations_window: 50\n"
        )

        settings = load_settings(str(config))

        assert settings.default_network == "testnet"
        assert settings.log_level == "DEBUG"
        assert settings.report.operations_window == 50
        assert settings.resolve_horizon_url() == "http://localhost:8000"

    def test_missing_yaml_gives_defaults(self, tmp_path):
        settings = LedgerReportingSettings.from_yaml(str(tmp_path / "missing.yaml"))
        assert settings.default_network == "public"
