from dotenv import load_dotenv
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path
import json
import os

from seo_audit.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    MAX_CONTENT_LENGTH_BYTES,
    PROXY_SERVICES,
    META_ISSUE_PENALTY,
    CONTENT_ISSUE_PENALTY,
    PERFORMANCE_ISSUE_PENALTY,
)

load_dotenv()  # Loads variables from .env file


def _parse_proxy_list(value: Optional[str]) -> list[str]:
    """Split a comma separated list of proxy templates."""
    if not value:
        return list(PROXY_SERVICES)
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    USER_AGENT = os.getenv("SEO_AUDIT_USER_AGENT", DEFAULT_USER_AGENT)
    TIMEOUT = int(os.getenv("SEO_AUDIT_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
    PROXIES = _parse_proxy_list(os.getenv("SEO_AUDIT_PROXIES"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    OUTPUT_DIR = os.getenv("SEO_AUDIT_OUTPUT_DIR", "audits")


settings = Settings()


@dataclass
class Config:
    """Configuration for the SEO audit."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    max_content_length: int = MAX_CONTENT_LENGTH_BYTES
    proxy_templates: list[str] = field(default_factory=lambda: list(PROXY_SERVICES))
    direct: bool = False  # Try the target itself before any proxy
    log_level: str = "INFO"
    output_dir: str = "audits"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("SEO_AUDIT_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=int(os.getenv("SEO_AUDIT_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            max_content_length=int(
                os.getenv("SEO_AUDIT_MAX_CONTENT_LENGTH", str(MAX_CONTENT_LENGTH_BYTES))
            ),
            proxy_templates=_parse_proxy_list(os.getenv("SEO_AUDIT_PROXIES")),
            direct=os.getenv("SEO_AUDIT_DIRECT", "false").lower() in ("1", "true", "yes"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            output_dir=os.getenv("SEO_AUDIT_OUTPUT_DIR", "audits"),
        )


@dataclass
class AuditThresholds:
    """Configurable thresholds for the audit rule sets."""

    # Meta tags
    title_min: int = 30
    title_max: int = 60
    meta_description_min: int = 120
    meta_description_max: int = 160

    # Content structure
    min_word_count: int = 300
    min_paragraphs: int = 3
    min_headings: int = 2

    # Performance hints (issue raised when count exceeds the value)
    max_css_files: int = 5
    max_js_files: int = 10
    max_inline_styles: int = 5
    max_inline_scripts: int = 5
    max_large_images: int = 10
    max_iframes: int = 2

    # Points deducted per issue
    meta_penalty: int = META_ISSUE_PENALTY
    content_penalty: int = CONTENT_ISSUE_PENALTY
    performance_penalty: int = PERFORMANCE_ISSUE_PENALTY

    @classmethod
    def from_env(cls) -> "AuditThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEO_AUDIT_THRESHOLD_
        e.g., SEO_AUDIT_THRESHOLD_TITLE_MAX=70

        Returns:
            AuditThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEO_AUDIT_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                try:
                    setattr(thresholds, field_name, int(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "AuditThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            AuditThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, int(threshold_config[field_name]))

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = AuditThresholds()
