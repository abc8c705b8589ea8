"""
ve_dist - 统一日志入口

推荐使用方式：
    from ve_dist.logging import get_logger, get_system_logger, get_indexing_logger

    # 通用日志器
    logger = get_logger(__name__)
    logger.info("这是一条信息日志")

    # 系统日志器
    system_logger = get_system_logger("MyService")
    system_logger.startup("MyService", "1.0")

    # 索引日志器
    indexing_logger = get_indexing_logger()
    indexing_logger.event_handled("Claimed", "0x...", 123)
"""

from .logger import (
    # 配置类
    LogConfig,

    # 核心日志器类
    BaseLogger,
    SystemLogger,
    IndexingLogger,
    ErrorLogger,

    # 配置管理
    get_config,
    set_config,

    # 便捷函数（重命名避免冲突）
    get_logger as _get_logger,
    get_system_logger as _get_system_logger,
    get_indexing_logger as _get_indexing_logger,
    get_error_logger as _get_error_logger,

    # 生命周期管理
    initialize_logging,
    shutdown_logging,

    # 健康状态
    get_health_status
)

# 自动初始化标记
_auto_initialized = False


def _ensure_initialized():
    """确保日志系统已初始化"""
    global _auto_initialized
    if not _auto_initialized:
        # 已经通过 set_config 配置过的不覆盖
        from . import logger as _logger_module
        if _logger_module._config is None:
            initialize_logging()
        _auto_initialized = True


# 统一入口函数 - 自动初始化
def get_logger(name: str) -> BaseLogger:
    """获取通用日志器（自动初始化）"""
    _ensure_initialized()
    return _get_logger(name)


def get_system_logger(name: str = "system") -> SystemLogger:
    """获取系统日志器（自动初始化）"""
    _ensure_initialized()
    return _get_system_logger(name)


def get_indexing_logger() -> IndexingLogger:
    """获取索引日志器（自动初始化）"""
    _ensure_initialized()
    return _get_indexing_logger()


def get_error_logger() -> ErrorLogger:
    """获取错误日志器（自动初始化）"""
    _ensure_initialized()
    return _get_error_logger()


__all__ = [
    'LogConfig',
    'BaseLogger',
    'SystemLogger',
    'IndexingLogger',
    'ErrorLogger',
    'get_logger',
    'get_system_logger',
    'get_indexing_logger',
    'get_error_logger',
    'initialize_logging',
    'shutdown_logging',
    'get_config',
    'set_config',
    'get_health_status'
]
