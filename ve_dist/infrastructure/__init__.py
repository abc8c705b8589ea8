"""基础设施层"""

from .config_manager import ConfigManager, VeDistSettings, LoggingSettings

__all__ = ['ConfigManager', 'VeDistSettings', 'LoggingSettings']
