"""
YAML configuration for Sailthru accounts, HTTP transport and logging.
"""

from .config_reader import ConfigReader, CONFIG_FILE  # noqa: F401
