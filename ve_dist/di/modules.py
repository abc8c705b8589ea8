"""
依赖注入模块配置

定义各个模块的依赖注入绑定规则
"""

from injector import Module, singleton, provider
from web3 import Web3

from ..infrastructure.config_manager import ConfigManager, VeDistSettings

# 服务接口和实现
from ..services.interfaces.chain_reader import IChainReader
from ..services.interfaces.entity_store import IEntityStore
from ..services.interfaces.price_oracle import IPriceOracle
from ..services.implementations.entity_store_impl import InMemoryEntityStore
from ..services.implementations.price_oracle_impl import PriceOracleImpl
from ..services.implementations.distributor_state_updater import DistributorStateUpdater
from ..services.implementations.user_reward_recorder import UserRewardRecorder
from ..services.events.event_handler import VeDistEventHandler
from ..services.events.decoder import VeDistEventDecoder

# 适配器
from ..adapters.chain.web3_reader import Web3ChainReader


class ConfigModule(Module):
    """配置模块"""

    def __init__(self, config_dir: str = "config"):
        self.config_dir = config_dir

    @singleton
    @provider
    def provide_settings(self) -> VeDistSettings:
        return ConfigManager(self.config_dir).load_settings()


class StoreModule(Module):
    """实体存储模块"""

    def configure(self, binder):
        binder.bind(IEntityStore, to=InMemoryEntityStore, scope=singleton)


class ChainModule(Module):
    """链上读取模块"""

    def configure(self, binder):
        binder.bind(IChainReader, to=Web3ChainReader, scope=singleton)

    @singleton
    @provider
    def provide_web3(self, settings: VeDistSettings) -> Web3:
        return Web3(Web3.HTTPProvider(settings.rpc_url))


class ServiceModule(Module):
    """计算与记录服务模块"""

    def configure(self, binder):
        binder.bind(IPriceOracle, to=PriceOracleImpl, scope=singleton)
        binder.bind(DistributorStateUpdater, to=DistributorStateUpdater, scope=singleton)
        binder.bind(UserRewardRecorder, to=UserRewardRecorder, scope=singleton)


class EventModule(Module):
    """事件模块"""

    def configure(self, binder):
        binder.bind(VeDistEventHandler, to=VeDistEventHandler, scope=singleton)
        binder.bind(VeDistEventDecoder, to=VeDistEventDecoder, scope=singleton)


# 所有模块的集合 - 按依赖顺序排列
ALL_MODULES = [
    ConfigModule,       # 配置 - 基础
    StoreModule,        # 实体存储
    ChainModule,        # 链上读取
    ServiceModule,      # 价格 / APR / 记录
    EventModule         # 事件处理 - 依赖其他服务
]
