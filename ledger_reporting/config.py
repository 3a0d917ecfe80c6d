"""
Ledger reporting configuration.
"""

import os
from typing import Dict, Optional

import yaml
from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class HorizonConfig(BaseSettings):
    """Horizon endpoint configuration."""

    public_url: str = "https://horizon.stellar.org"
    testnet_url: str = "https://horizon-testnet.stellar.org"

    # Seconds before a single Horizon request is abandoned
    request_timeout: int = 10


class ReportConfig(BaseSettings):
    """Report window configuration."""

    # Operations scanned when counting payments (one page, not a lifetime count)
    operations_window: int = 200

    # Recent transactions included in an account report
    recent_transactions: int = 5

    # Page size when listing a transaction's operations
    transaction_operations_limit: int = 200


class LedgerReportingSettings(BaseSettings):
    """Main ledger reporting settings."""

    horizon: HorizonConfig = Field(default_factory=HorizonConfig)

    report: ReportConfig = Field(default_factory=ReportConfig)

    # Network used when none is given: "public", "testnet" or a Horizon URL
    default_network: str = Field(default="public")

    # Where JSON reports land when --out is given without a filename
    report_output_dir: str = Field(default=".")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = ConfigDict(
        env_prefix="LEDGER_REPORTING_",
        env_nested_delimiter="__",
    )

    def resolve_horizon_url(self, network: Optional[str] = None) -> str:
        """Map a network name to its Horizon URL; unknown names are custom URLs."""
        network = network or self.default_network
        known = {
            "public": self.horizon.public_url,
            "testnet": self.horizon.testnet_url,
        }
        return known.get(network, network)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "LedgerReportingSettings":
        """Load settings from YAML file."""
        if not os.path.exists(yaml_path):
            return cls()

        with open(yaml_path, "r") as f:
            yaml_config = yaml.safe_load(f) or {}

        return cls._parse_yaml_config(yaml_config)

    @classmethod
    def _parse_yaml_config(cls, config: Dict) -> "LedgerReportingSettings":
        """Parse YAML config into settings."""
        kwargs = {}

        if "horizon" in config:
            kwargs["horizon"] = HorizonConfig(**config["horizon"])

        if "report" in config:
            kwargs["report"] = ReportConfig(**config["report"])

        for key in [
            "default_network",
            "report_output_dir",
            "log_level",
        ]:
            if key in config:
                kwargs[key] = config[key]

        return cls(**kwargs)


def load_settings(config_path: Optional[str] = None) -> LedgerReportingSettings:
    """Load ledger reporting settings."""
    if config_path is None:
        # Look for config in standard locations
        search_paths = [
            "config/ledger_reporting.yaml",
            "/etc/ledger-reporting/config.yaml",
        ]
        for path in search_paths:
            if os.path.exists(path):
                config_path = path
                break

    if config_path:
        return LedgerReportingSettings.from_yaml(config_path)

    return LedgerReportingSettings()
