"""
Configuration for FloraSense
============================
Runtime settings for the web service and the margin classifiers.
Values default from ``FLORASENSE_*`` environment variables.
Setups the logging configuration as well.
"""

import os
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_optional_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("FLORASENSE_ENV", "development"))
    secret_key: str = field(default_factory=lambda: os.getenv("FLORASENSE_SECRET_KEY", "FloraSenseDevSecretKey"))
    host: str = field(default_factory=lambda: os.getenv("FLORASENSE_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("FLORASENSE_PORT", 8000))

    DEBUG: bool = field(default_factory=lambda: _env_bool("FLORASENSE_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("FLORASENSE_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("FLORASENSE_LOG_FILE", "logs/florasense.log"))
    log_to_file: bool = field(default_factory=lambda: _env_bool("FLORASENSE_LOG_TO_FILE", True))

    # Training data; empty means the dataset shipped with the package
    dataset_path: str = field(default_factory=lambda: os.getenv("FLORASENSE_DATASET_PATH", ""))

    # Margin classifier training. No seed -> a different boundary on every start.
    training_seed: int | None = field(default_factory=lambda: _env_optional_int("FLORASENSE_TRAINING_SEED"))
    learning_rate: float = field(default_factory=lambda: _env_float("FLORASENSE_LEARNING_RATE", 0.01))
    lambda_param: float = field(default_factory=lambda: _env_float("FLORASENSE_LAMBDA", 0.01))
    n_iterations: int = field(default_factory=lambda: _env_int("FLORASENSE_ITERATIONS", 1000))

    json_sort_keys: bool = field(default_factory=lambda: _env_bool("FLORASENSE_JSON_SORT_KEYS", False))

    def as_flask_config(self) -> dict[str, Any]:
        """Render configuration values for Flask application."""
        return {
            "ENV": self.environment,
            "SECRET_KEY": self.secret_key,
            "DEBUG": self.DEBUG,
            "DATASET_PATH": self.dataset_path,
            "TRAINING_SEED": self.training_seed,
        }


def validate_config(config: AppConfig) -> list[str]:
    """
    Check configuration for values that will likely misbehave.

    Returns:
        List of warning messages (empty if all good)
    """
    warnings = []

    if config.environment == "production" and config.secret_key == "FloraSenseDevSecretKey":
        warnings.append("Running in production with the development secret key. Set FLORASENSE_SECRET_KEY.")

    if config.learning_rate <= 0:
        warnings.append(f"Learning rate ({config.learning_rate}) must be positive.")
    elif config.learning_rate > 0.5:
        warnings.append(
            f"Learning rate ({config.learning_rate}) is very high. Training may not converge. Recommended: 0.001-0.1"
        )

    if config.lambda_param < 0:
        warnings.append(f"Regularization strength ({config.lambda_param}) must not be negative.")

    if config.n_iterations < 100:
        warnings.append(
            f"Training iterations ({config.n_iterations}) is low. Boundaries may be poorly fit. Recommended: 1000"
        )

    if config.dataset_path and not Path(config.dataset_path).exists():
        warnings.append(f"Dataset file does not exist: {config.dataset_path}")

    return warnings


def setup_logging(debug: bool = False, *, level: str = "INFO", log_file: str | None = "logs/florasense.log") -> None:
    """Setup logging configuration."""
    import logging
    import sys
    from logging.handlers import RotatingFileHandler

    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    # Root logger
    root = logging.getLogger()
    root.setLevel(log_level)

    # Keep existing handlers but avoid adding duplicates when create_app is called multiple times
    has_console = any(getattr(h, "name", "") == "florasense_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "florasense_file" for h in root.handlers)
    added_handler = False

    # Console handler (force UTF-8 to avoid UnicodeEncodeError on Windows terminals)
    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "florasense_console"
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    # File handler
    if log_file and not has_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "florasense_file"
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    # Ensure handler levels follow the desired log level
    for handler in root.handlers:
        if getattr(handler, "name", "") in {"florasense_console", "florasense_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info(f"Logging initialized at level: {logging.getLevelName(log_level)}")

    if _env_bool("FLORASENSE_SILENCE_WERKZEUG", True):
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    import logging

    config = AppConfig()
    logger = logging.getLogger("config_loader")
    for warning in validate_config(config):
        logger.warning(warning)
    return config
