"""Configuration and logging setup.

Classes:
    SunkConfig: Server URL, credentials and protocol settings.
"""

from sunk.core.config import SunkConfig
from sunk.core.log import setup_logging

__all__ = ["SunkConfig", "setup_logging"]
