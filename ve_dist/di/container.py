"""
依赖注入容器

基于 Python-injector 的依赖注入容器实现
"""

from injector import Injector, Module
from typing import Type, TypeVar, List, Optional

from ..infrastructure.config_manager import VeDistSettings
from ..logging import get_system_logger, initialize_logging


T = TypeVar('T')


class DIContainer:
    """依赖注入容器"""

    def __init__(self, modules: Optional[List[Module]] = None):
        self.modules = modules or []
        self.injector = Injector(self.modules)
        self.logger = get_system_logger()
        self.initialized = False

    def register_module(self, module: Module):
        """注册模块"""
        self.modules.append(module)
        self.injector = Injector(self.modules)
        self.logger.info(f"注册模块: {module.__class__.__name__}")

    def register_modules(self, modules: List[Module]):
        """注册多个模块"""
        self.modules.extend(modules)
        self.injector = Injector(self.modules)
        self.logger.info(f"注册了 {len(modules)} 个模块")

    def get(self, interface: Type[T]) -> T:
        """获取实例"""
        return self.injector.get(interface)

    def initialize(self, config_dir: str = "config"):
        """初始化容器：注册默认模块并按配置初始化日志"""
        if self.initialized:
            return

        from .modules import ALL_MODULES, ConfigModule
        self.register_modules([
            ConfigModule(config_dir) if module is ConfigModule else module()
            for module in ALL_MODULES
        ])

        settings = self.get(VeDistSettings)
        initialize_logging(
            log_dir=settings.logging.log_dir,
            level=settings.logging.level,
            enable_console=settings.logging.enable_console,
            enable_file=settings.logging.enable_file,
        )
        self.logger = get_system_logger()
        self.initialized = True
        self.logger.info("依赖注入容器已初始化")


# 全局容器实例（首次获取时创建）
_container: Optional[DIContainer] = None


def get_container(config_dir: str = "config") -> DIContainer:
    """获取全局容器"""
    global _container
    if _container is None:
        _container = DIContainer()
    if not _container.initialized:
        _container.initialize(config_dir)
    return _container
