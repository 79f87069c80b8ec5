from .settings import ImporterSettings
from .loader import load_config_data, build_settings

__all__ = ["ImporterSettings", "load_config_data", "build_settings"]
