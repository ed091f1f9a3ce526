import json
from pathlib import Path
from typing import Dict, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThrottlingConfig(BaseModel):
    """Optional network throttling applied to every request of a session."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    download: float = 1.5 * 1024 * 1024  # 1.5 Mbps download
    upload: float = 750 * 1024  # 750 Kbps upload
    latency_ms: int = Field(default=40, ge=0)


class Config(BaseSettings):
    """Run configuration for the page load performance tester."""

    sessions: int = Field(default=10, ge=1)
    iterations_per_session: int = Field(default=3, ge=1)
    target_url: str = "http://localhost:3000/products"
    delay_between_sessions_ms: int = Field(default=500, ge=0)
    save_results: bool = True
    collect_metrics: bool = True
    throttling: ThrottlingConfig = ThrottlingConfig()
    output_dir: Path = Path(".")
    headless: bool = True
    export_csv: bool = False
    generate_graph: bool = False
    log_level: str = "INFO"
    library_log_levels: Dict[str, str] = {
        "asyncio": "WARNING",
        "matplotlib": "WARNING",
    }

    model_config = SettingsConfigDict(
        env_prefix='PAGELOAD_',
        env_nested_delimiter='__',
        frozen=True,
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert output_dir to Path if it's a string
                if "output_dir" in config:
                    config["output_dir"] = Path(config["output_dir"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )

    def to_report_dict(self) -> Dict[str, Any]:
        """Serializable view of the run configuration for the saved report."""
        return self.model_dump(mode="json", exclude={"library_log_levels", "log_level"})
