"""
配置管理器
负责加载 ve_dist 的 YAML 配置文件
"""

import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, field
import logging

from ..domain.constants import DEFAULT_USDC_ADDRESS
from ..domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class LoggingSettings:
    """日志配置"""
    log_dir: str = "logs"
    level: str = "INFO"
    enable_console: bool = True
    enable_file: bool = True


@dataclass
class VeDistSettings:
    """ve 分发器索引配置"""
    usdc_address: str = DEFAULT_USDC_ADDRESS
    rpc_url: str = ""
    # 是否把合约读取固定在事件所在区块
    block_pinning: bool = True
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def __post_init__(self):
        self.usdc_address = self.usdc_address.lower()


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.settings: Optional[VeDistSettings] = None

    def load_settings(self, filename: str = "ve_dist.yaml") -> VeDistSettings:
        """加载配置，文件不存在时使用默认配置"""
        config_path = self.config_dir / filename

        if not config_path.exists():
            logger.warning(f"⚠️ 配置文件不存在，使用默认配置: {config_path}")
            self.settings = VeDistSettings()
            return self.settings

        try:
            with open(config_path, 'r', encoding='utf-8') as file:
                config_data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"配置文件解析失败 {config_path}: {e}") from e

        self.settings = self.parse_settings(config_data)
        logger.info(f"成功加载配置: {config_path}")
        return self.settings

    @staticmethod
    def parse_settings(config_data: Dict[str, Any]) -> VeDistSettings:
        """将配置字典转换为 VeDistSettings"""
        if not isinstance(config_data, dict):
            raise ConfigurationError("配置根节点必须是字典")

        data = config_data.get('ve_dist', config_data)
        logging_data = data.get('logging', {}) or {}
        if not isinstance(logging_data, dict):
            raise ConfigurationError("logging 配置必须是字典")

        usdc_address = data.get('usdc_address', DEFAULT_USDC_ADDRESS)
        if not isinstance(usdc_address, str) or not usdc_address.startswith('0x') or len(usdc_address) != 42:
            raise ConfigurationError(f"无效的 usdc_address: {usdc_address}")

        level = str(logging_data.get('level', 'INFO')).upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigurationError(f"无效的日志级别: {level}")

        return VeDistSettings(
            usdc_address=usdc_address,
            rpc_url=data.get('rpc_url', '') or '',
            block_pinning=bool(data.get('block_pinning', True)),
            logging=LoggingSettings(
                log_dir=logging_data.get('log_dir', 'logs'),
                level=level,
                enable_console=bool(logging_data.get('enable_console', True)),
                enable_file=bool(logging_data.get('enable_file', True)),
            )
        )

    def get_settings(self) -> VeDistSettings:
        """获取配置"""
        if not self.settings:
            return self.load_settings()
        return self.settings
