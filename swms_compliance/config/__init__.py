# swms_compliance/config/__init__.py
"""Configuration system for swms-compliance."""

from .loader import get_config_dir, get_config_path, load_config
from .schema import (
    HistoryConfig,
    OutputConfig,
    PolicyConfig,
    RiskLevelConfig,
    StorageConfig,
    SwmsComplianceConfig,
)

__all__ = [
    "SwmsComplianceConfig",
    "RiskLevelConfig",
    "PolicyConfig",
    "HistoryConfig",
    "StorageConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
    "get_config_dir",
]
