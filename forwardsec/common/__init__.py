# Common utilities
from forwardsec.common.config import Config as Config
from forwardsec.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "setup_logger"]
