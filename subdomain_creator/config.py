"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
Import from here instead of hardcoding values.

Environment-backed settings are class attributes, filled by each class's
load() when this module is imported and again by load_environment().
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    # Application Info
    APP_NAME = "Subdomain Creator"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Check subdomain availability and generate DNS forwarding configuration"

    # Static Files
    STATIC_DIR = "static"
    INDEX_HTML = "static/html/index.html"

    # Default Values
    DEFAULT_OUTPUT_FORMAT = "list"

    # Response headers added when FeatureFlags.SECURITY_HEADERS is on
    SECURITY_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "SAMEORIGIN",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-DNS-Prefetch-Control": "off",
    }

    # Server (from environment)
    HOST = "0.0.0.0"
    PORT = 3000
    CORS_ORIGINS = ["*"]

    @classmethod
    def load(cls):
        """Read settings from environment"""
        cls.HOST = os.getenv("HOST", "0.0.0.0")
        cls.PORT = int(os.getenv("PORT", "3000"))
        cls.CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")


class DnsConfig:
    """DNS record generation settings"""

    # Canonical CNAME endpoint of the hosting platform
    PLATFORM_HOST = "cname.render.com"
    RECORD_TTL = 3600

    # Comma-separated override of the built-in extension catalog
    SUPPORTED_EXTENSIONS = ""

    @classmethod
    def load(cls):
        """Read settings from environment"""
        cls.PLATFORM_HOST = os.getenv("DNS_PLATFORM_HOST", "cname.render.com")
        cls.RECORD_TTL = int(os.getenv("DNS_RECORD_TTL", "3600"))
        cls.SUPPORTED_EXTENSIONS = os.getenv("SUPPORTED_EXTENSIONS", "")


class AvailabilityConfig:
    """Availability checker settings"""

    CHECKER_TYPE = "simulated"
    AVAILABILITY_RATE = 0.7

    # Optional fixed seed for reproducible demos
    RANDOM_SEED = ""

    @classmethod
    def load(cls):
        """Read settings from environment"""
        cls.CHECKER_TYPE = os.getenv("AVAILABILITY_CHECKER", "simulated")
        cls.AVAILABILITY_RATE = float(os.getenv("AVAILABILITY_RATE", "0.7"))
        cls.RANDOM_SEED = os.getenv("RANDOM_SEED", "")

    @classmethod
    def get_seed(cls) -> Optional[int]:
        """Get configured random seed, or None for an entropy source"""
        if not cls.RANDOM_SEED.strip():
            return None
        return int(cls.RANDOM_SEED)


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    LOG_LEVEL = "INFO"
    LOG_FILE = None  # Optional
    LOG_FILE_MAX_BYTES = 10485760  # 10MB
    LOG_FILE_BACKUP_COUNT = 5

    @classmethod
    def load(cls):
        """Read settings from environment"""
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        cls.LOG_FILE = os.getenv("LOG_FILE")
        cls.LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))
        cls.LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.INFO)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    # Suppress noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Feature Flags
# ============================================================================

class FeatureFlags:
    """Feature flags for optional functionality"""

    ENABLE_CORS = True
    SECURITY_HEADERS = True
    SERVE_STATIC = True

    # Development
    DEBUG = False
    RELOAD = False

    @classmethod
    def load(cls):
        """Read flags from environment"""
        cls.ENABLE_CORS = os.getenv("ENABLE_CORS", "true").lower() == "true"
        cls.SECURITY_HEADERS = os.getenv("SECURITY_HEADERS", "true").lower() == "true"
        cls.SERVE_STATIC = os.getenv("SERVE_STATIC", "true").lower() == "true"
        cls.DEBUG = os.getenv("DEBUG", "false").lower() == "true"
        cls.RELOAD = os.getenv("RELOAD", "false").lower() == "true"


# ============================================================================
# Environment Loading
# ============================================================================

def load_settings():
    """Refresh every settings class from the current environment"""
    for settings in (AppConfig, DnsConfig, AvailabilityConfig, LogConfig, FeatureFlags):
        settings.load()


def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file and refresh settings.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        # Reload default .env
        load_dotenv(override=True)

    load_settings()


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if critical configuration is invalid.
    """
    from .models import ExtensionCatalog
    from .repositories import CheckerFactory

    errors = []

    if not DnsConfig.PLATFORM_HOST.strip():
        errors.append("DNS_PLATFORM_HOST cannot be empty")

    if DnsConfig.RECORD_TTL <= 0:
        errors.append(f"DNS_RECORD_TTL must be positive (got {DnsConfig.RECORD_TTL})")

    if not 0.0 <= AvailabilityConfig.AVAILABILITY_RATE <= 1.0:
        errors.append(f"AVAILABILITY_RATE must be between 0 and 1 (got {AvailabilityConfig.AVAILABILITY_RATE})")

    if DnsConfig.SUPPORTED_EXTENSIONS:
        try:
            ExtensionCatalog.from_string(DnsConfig.SUPPORTED_EXTENSIONS)
        except ValueError as e:
            errors.append(f"SUPPORTED_EXTENSIONS is invalid: {e}")

    supported = [c.value for c in CheckerFactory.get_supported_checkers()]
    if AvailabilityConfig.CHECKER_TYPE.strip().lower() not in supported:
        errors.append(
            f"Unknown AVAILABILITY_CHECKER '{AvailabilityConfig.CHECKER_TYPE}' "
            f"(supported: {', '.join(supported)})"
        )

    try:
        AvailabilityConfig.get_seed()
    except ValueError:
        errors.append(f"RANDOM_SEED must be an integer (got '{AvailabilityConfig.RANDOM_SEED}')")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.info(f"Configuration validated: checker={AvailabilityConfig.CHECKER_TYPE}, "
                f"platform host={DnsConfig.PLATFORM_HOST}")


# Load settings on module import
load_settings()

# Export for convenience
__all__ = [
    'AppConfig',
    'DnsConfig',
    'AvailabilityConfig',
    'LogConfig',
    'FeatureFlags',
    'load_settings',
    'load_environment',
    'setup_logging',
    'validate_config',
]
