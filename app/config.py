"""
Application Configuration

Centralized configuration management with validation.
Loads settings from environment variables (and a local .env file)
with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

FIXTURE_DIR = Path(__file__).resolve().parent / 'fixtures'
DEFAULT_DEMO_SCHEDULE = FIXTURE_DIR / 'schedule-detail-feb2026.html'
SUPPORTED_HTML_PARSERS = ('lxml', 'html5lib')


@dataclass
class ParserConfig:
    """Schedule parser configuration"""
    html_parser: str = 'lxml'
    demo_schedule_path: Path = DEFAULT_DEMO_SCHEDULE

    @classmethod
    def from_env(cls) -> 'ParserConfig':
        """Load parser config from environment"""
        return cls(
            html_parser=os.environ.get('SCHEDULE_HTML_PARSER', 'lxml'),
            demo_schedule_path=Path(os.environ.get('DEMO_SCHEDULE_PATH', str(DEFAULT_DEMO_SCHEDULE)))
        )

    def is_valid(self) -> bool:
        """Check if the configured tree builder is supported"""
        return self.html_parser in SUPPORTED_HTML_PARSERS


@dataclass
class ApiConfig:
    """HTTP surface configuration"""
    host: str = '127.0.0.1'
    port: int = 3001
    debug: bool = False
    max_content_length: int = 1024 * 1024

    @classmethod
    def from_env(cls) -> 'ApiConfig':
        """Load API config from environment"""
        return cls(
            host=os.environ.get('HOST', '127.0.0.1'),
            port=int(os.environ.get('PORT', '3001')),
            debug=os.environ.get('DEBUG', 'false').lower() == 'true',
            max_content_length=int(os.environ.get('MAX_CONTENT_LENGTH', str(1024 * 1024)))
        )


@dataclass
class AppConfig:
    """Main application configuration"""
    log_level: str
    parser: ParserConfig
    api: ApiConfig

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load all configuration from environment"""
        return cls(
            log_level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
            parser=ParserConfig.from_env(),
            api=ApiConfig.from_env()
        )

    def validate(self) -> list:
        """Validate configuration and return list of issues"""
        issues = []

        if not self.parser.is_valid():
            issues.append(
                f"SCHEDULE_HTML_PARSER={self.parser.html_parser!r} is not one of {SUPPORTED_HTML_PARSERS}"
            )

        if not self.parser.demo_schedule_path.exists():
            issues.append(f"Demo schedule not found at {self.parser.demo_schedule_path}")

        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            issues.append(f"Unknown LOG_LEVEL {self.log_level!r}")

        return issues


# Singleton config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create application config singleton"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()

        # Log configuration status
        issues = _config.validate()
        for issue in issues:
            logger.warning(f"Config: {issue}")

        logger.info(f"Config loaded - Parser: {_config.parser.html_parser}, Port: {_config.api.port}")

    return _config


def reload_config() -> AppConfig:
    """Force reload configuration from environment"""
    global _config
    _config = None
    return get_config()
