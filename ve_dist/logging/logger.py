"""
ve_dist - 统一日志模块核心实现

整合所有日志功能，提供：
- 基础日志器类
- 专用日志器（系统、索引、错误）
- 简单配置
- 文件和控制台输出
- 统一的日志格式
"""

import logging
import os
from typing import Dict, Any, Optional
from pathlib import Path
from logging.handlers import RotatingFileHandler


class LogConfig:
    """日志配置类"""

    def __init__(self,
                 log_dir: str = "logs",
                 level: str = "INFO",
                 console_level: str = "INFO",
                 file_level: str = "DEBUG",
                 max_file_size: int = 5 * 1024 * 1024,  # 5MB
                 backup_count: int = 3,
                 enable_console: bool = True,
                 enable_file: bool = True):
        self.log_dir = log_dir
        self.level = getattr(logging, level.upper())
        self.console_level = getattr(logging, console_level.upper())
        self.file_level = getattr(logging, file_level.upper())
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file

        # 只有写文件时才需要日志目录
        if enable_file:
            Path(log_dir).mkdir(parents=True, exist_ok=True)


class BaseLogger:
    """基础日志器类"""

    def __init__(self, name: str, config: Optional[LogConfig] = None):
        self.name = name
        self.config = config or LogConfig()
        self.logger = logging.getLogger(name)
        self._setup_logger()

    def _setup_logger(self):
        """设置日志器"""
        self.logger.setLevel(self.config.level)

        # 清除现有处理器
        self.logger.handlers.clear()

        if self.config.enable_console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(self.config.console_level)
            console_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if self.config.enable_file:
            log_file = os.path.join(self.config.log_dir, f"{self.name}.log")
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self.config.max_file_size,
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(self.config.file_level)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """调试日志"""
        extra_info = f" | {self._format_extra(**kwargs)}" if kwargs else ""
        self.logger.debug(f"{message}{extra_info}")

    def info(self, message: str, **kwargs):
        """信息日志"""
        extra_info = f" | {self._format_extra(**kwargs)}" if kwargs else ""
        self.logger.info(f"{message}{extra_info}")

    def warning(self, message: str, **kwargs):
        """警告日志"""
        extra_info = f" | {self._format_extra(**kwargs)}" if kwargs else ""
        self.logger.warning(f"{message}{extra_info}")

    def error(self, message: str, **kwargs):
        """错误日志"""
        extra_info = f" | {self._format_extra(**kwargs)}" if kwargs else ""
        self.logger.error(f"{message}{extra_info}")

    def critical(self, message: str, **kwargs):
        """严重错误日志"""
        extra_info = f" | {self._format_extra(**kwargs)}" if kwargs else ""
        self.logger.critical(f"{message}{extra_info}")

    def _format_extra(self, **kwargs) -> str:
        """格式化额外信息"""
        return " | ".join([f"{k}={v}" for k, v in kwargs.items()])


class SystemLogger(BaseLogger):
    """系统日志器"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("system", config)

    def startup(self, component: str, version: str = "", **kwargs):
        """记录组件启动"""
        self.info(f"🚀 组件启动: {component} {version}",
                  component=component, version=version, **kwargs)

    def shutdown(self, component: str, reason: str = "", **kwargs):
        """记录组件关闭"""
        self.info(f"🛑 组件关闭: {component} ({reason})",
                  component=component, reason=reason, **kwargs)

    def config_change(self, component: str, key: str, old_value: Any, new_value: Any):
        """记录配置变更"""
        self.info(f"⚙️ 配置变更: {component}.{key} {old_value} -> {new_value}")


class IndexingLogger(BaseLogger):
    """索引日志器 - 记录事件处理与实体更新"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("indexing", config)

    def event_handled(self, event_type: str, address: str, block_number: int, **kwargs):
        """记录事件处理完成"""
        self.info(f"📥 事件处理: {event_type} {address} @{block_number}",
                  event_type=event_type, address=address, block_number=block_number, **kwargs)

    def distributor_refreshed(self, distributor: str, apr: Any, tokens_per_week: Any, **kwargs):
        """记录分发器状态刷新"""
        self.info(f"🔄 分发器刷新: {distributor} APR:{apr}% 周奖励:{tokens_per_week}",
                  distributor=distributor, apr=apr, tokens_per_week=tokens_per_week, **kwargs)

    def claim_recorded(self, user: str, claimed: Any, claimed_usd: Any, apr: Any, **kwargs):
        """记录用户领取奖励"""
        self.info(f"💰 奖励领取: {user} {claimed} (${claimed_usd}) APR:{apr}%",
                  user=user, claimed=claimed, claimed_usd=claimed_usd, apr=apr, **kwargs)


class ErrorLogger(BaseLogger):
    """错误日志器"""

    def __init__(self, config: Optional[LogConfig] = None):
        super().__init__("error", config)

    def exception(self, error: Exception, context: str = "", **kwargs):
        """记录异常"""
        self.error(f"⚠️ 异常: {context} {type(error).__name__}: {str(error)}",
                   error_type=type(error).__name__, error_message=str(error), context=context, **kwargs)

    def chain_read_error(self, method: str, address: str, error_message: str, **kwargs):
        """记录链上读取错误"""
        self.error(f"🔴 链上读取失败: {method} {address} {error_message}",
                   method=method, address=address, error_message=error_message, **kwargs)


# 全局日志器实例缓存
_loggers: Dict[str, BaseLogger] = {}
_config: Optional[LogConfig] = None


def get_config() -> LogConfig:
    """获取全局日志配置"""
    global _config
    if _config is None:
        _config = LogConfig()
    return _config


def set_config(config: LogConfig):
    """设置全局日志配置"""
    global _config
    _config = config


def get_logger(name: str) -> BaseLogger:
    """获取通用日志器"""
    if name not in _loggers:
        _loggers[name] = BaseLogger(name, get_config())
    return _loggers[name]


def get_system_logger(name: str = "system") -> SystemLogger:
    """获取系统日志器"""
    logger_key = f"system.{name}" if name != "system" else "system"
    if logger_key not in _loggers:
        _loggers[logger_key] = SystemLogger(get_config())
        # 如果有自定义名称，修改内部日志器的名称
        if name != "system":
            _loggers[logger_key].logger.name = logger_key
    return _loggers[logger_key]


def get_indexing_logger() -> IndexingLogger:
    """获取索引日志器"""
    if "indexing" not in _loggers:
        _loggers["indexing"] = IndexingLogger(get_config())
    return _loggers["indexing"]


def get_error_logger() -> ErrorLogger:
    """获取错误日志器"""
    if "error" not in _loggers:
        _loggers["error"] = ErrorLogger(get_config())
    return _loggers["error"]


def initialize_logging(log_dir: str = "logs", level: str = "INFO",
                       enable_console: bool = True, enable_file: bool = True) -> bool:
    """初始化日志系统

    Args:
        log_dir: 日志目录
        level: 日志级别
        enable_console: 是否启用控制台输出（默认True）
        enable_file: 是否写入日志文件（默认True）
    """
    try:
        config = LogConfig(log_dir=log_dir, level=level,
                           enable_console=enable_console, enable_file=enable_file)
    except (AttributeError, OSError) as e:
        logging.getLogger(__name__).error(f"Failed to initialize logging: {e}")
        return False

    set_config(config)

    # 清理已有实例，使用新配置
    _loggers.clear()

    system_logger = get_system_logger()
    system_logger.startup("UnifiedLoggingSystem", "v1.0")
    return True


def shutdown_logging():
    """关闭日志系统"""
    system_logger = get_system_logger()
    system_logger.shutdown("UnifiedLoggingSystem", "正常关闭")

    # 关闭所有处理器
    for logger in _loggers.values():
        for handler in logger.logger.handlers:
            handler.close()

    _loggers.clear()


def get_health_status() -> Dict[str, Any]:
    """获取日志系统健康状态"""
    return {
        "status": "healthy",
        "version": "v1.0",
        "active_loggers": len(_loggers),
        "config": {
            "log_dir": get_config().log_dir,
            "level": logging.getLevelName(get_config().level),
            "enable_file": get_config().enable_file,
        }
    }
