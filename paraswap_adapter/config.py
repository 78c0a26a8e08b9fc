"""
Configuration management for the ParaSwap swap adapter

Loads settings from environment variables and .env file.
Includes logging configuration with file output.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List

from dotenv import load_dotenv


def _load_env_file():
    """Load .env file from project root"""
    current = Path(__file__).parent.parent  # paraswap_adapter package parent
    env_file = current / ".env"

    if env_file.exists():
        load_dotenv(env_file)


# Load .env on module import
_load_env_file()


def _get_env(key: str, default: Optional[str] = "") -> Optional[str]:
    """Get environment variable with default"""
    value = os.getenv(key)
    if value is None:
        return default
    return value


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid float value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    """Get environment variable as int (empty string counts as unset)"""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid int value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as bool"""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


@dataclass
class ParaSwapConfig:
    """ParaSwap (Velora) API configuration"""
    base_url: str = field(default_factory=lambda: _get_env("PARASWAP_BASE_URL", "https://api.paraswap.io"))
    api_version: str = field(default_factory=lambda: _get_env("PARASWAP_API_VERSION", "6.2"))
    # Partner name reported to the aggregator in buildTx requests
    partner: str = field(default_factory=lambda: _get_env("PARASWAP_PARTNER", "paraswap-adapter"))
    timeout: float = field(default_factory=lambda: _get_env_float("PARASWAP_TIMEOUT", 30.0))


@dataclass
class SwapConfig:
    """
    Adapter-level swap defaults

    swap_max_fee is in the smallest unit of the fee currency (wei, or
    paymaster token units for bundled accounts). None disables the ceiling.
    """
    swap_max_fee: Optional[int] = field(default_factory=lambda: _get_env_int("SWAP_MAX_FEE", None))
    paymaster_token: Optional[str] = field(default_factory=lambda: _get_env("SWAP_PAYMASTER_TOKEN", None) or None)


@dataclass
class EVMConfig:
    """EVM RPC and gas configuration used by the bundled web3 accounts"""
    rpc_url: str = field(default_factory=lambda: _get_env("EVM_RPC_URL", ""))
    # Multiplier for gas limit estimates (not gas price) to provide buffer
    gas_limit_multiplier: float = field(default_factory=lambda: _get_env_float("EVM_GAS_LIMIT_MULTIPLIER", 1.1))
    # Gas limit used when estimation reverts (e.g. swap quoted before its approval is mined)
    fallback_gas_limit: int = field(default_factory=lambda: _get_env_int("EVM_FALLBACK_GAS_LIMIT", 300_000))
    # Seconds to wait for a receipt after broadcast
    receipt_timeout: float = field(default_factory=lambda: _get_env_float("EVM_RECEIPT_TIMEOUT", 120.0))
    # Priority fee (tip) in gwei for EIP-1559 chains
    priority_fee_gwei: float = field(default_factory=lambda: _get_env_float("EVM_PRIORITY_FEE_GWEI", 0.1))
    # Base fee multiplier for maxFeePerGas
    base_fee_multiplier: float = field(default_factory=lambda: _get_env_float("EVM_BASE_FEE_MULTIPLIER", 2.0))


def _get_default_log_path() -> str:
    """Get default log file path under paraswap_adapter/log/ with UTC timestamp"""
    from datetime import datetime, timezone
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_dir = Path(__file__).parent / "log"
    return str(log_dir / f"paraswap_adapter_{timestamp}.log")


@dataclass
class LoggingConfig:
    """
    Logging configuration with file output.

    Environment variables:
        LOG_FILE: Path to log file (empty disables file output)
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
        LOG_FORMAT: Custom log format string
        LOG_CONSOLE: Enable console output (default: true)
        LOG_MAX_BYTES: Max log file size before rotation (default: 10MB)
        LOG_BACKUP_COUNT: Number of backup files to keep (default: 5)
    """
    log_file: str = field(default_factory=lambda: _get_env("LOG_FILE", _get_default_log_path()))
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _get_env(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    console_output: bool = field(default_factory=lambda: _get_env_bool("LOG_CONSOLE", True))
    max_bytes: int = field(default_factory=lambda: _get_env_int("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    backup_count: int = field(default_factory=lambda: _get_env_int("LOG_BACKUP_COUNT", 5))

    @property
    def level(self) -> int:
        """Get numeric log level"""
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class Config:
    """
    Main configuration container

    Usage:
        from paraswap_adapter.config import config

        print(config.paraswap.base_url)
        print(config.swap.swap_max_fee)
    """
    paraswap: ParaSwapConfig = field(default_factory=ParaSwapConfig)
    swap: SwapConfig = field(default_factory=SwapConfig)
    evm: EVMConfig = field(default_factory=EVMConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def reload(cls) -> "Config":
        """Reload configuration from environment"""
        _load_env_file()
        return cls()


# Global config instance
config = Config()


def get_config() -> Config:
    """Get global configuration instance"""
    return config


def reload_config() -> Config:
    """Reload and return new configuration"""
    global config
    config = Config.reload()
    return config


def setup_logging(
    log_config: Optional[LoggingConfig] = None,
    logger_name: str = "paraswap_adapter",
) -> logging.Logger:
    """
    Set up logging based on configuration.

    Creates handlers for file and/or console output with rotation.
    The log file directory is created automatically if it doesn't exist.

    Args:
        log_config: Logging configuration (uses global config if None)
        logger_name: Name of the logger to configure

    Returns:
        Configured logger instance
    """
    if log_config is None:
        log_config = config.logging

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_config.level)

    # Close before removing to flush buffers and release file handles
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.log_format)

    handlers: List[logging.Handler] = []

    if log_config.log_file:
        from logging.handlers import RotatingFileHandler

        log_path = Path(log_config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(log_config.level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if log_config.console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_config.level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    for handler in handlers:
        logger.addHandler(handler)

    if log_config.log_file:
        logger.info(f"Logging initialized: file={log_config.log_file}, level={log_config.log_level}")

    return logger
