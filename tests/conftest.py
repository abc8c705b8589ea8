from decimal import Decimal

import pytest
from injector import Injector

from ve_dist.logging import LogConfig, set_config

# 测试中只输出到控制台，不写日志文件
set_config(LogConfig(enable_file=False))

from ve_dist.di.modules import ServiceModule, EventModule  # noqa: E402
from ve_dist.domain.models import Controller, Distributor, GovernanceLock, User  # noqa: E402
from ve_dist.infrastructure.config_manager import LoggingSettings, VeDistSettings  # noqa: E402
from ve_dist.services.events import VeDistEventHandler  # noqa: E402
from ve_dist.services.implementations import InMemoryEntityStore  # noqa: E402

from .fakes import (  # noqa: E402
    CONTROLLER, DIST, E18, LIQUIDATOR, REWARD_TOKEN, USDC, USER_ID, VE,
    FakeBindingsModule, FakeChainReader
)


@pytest.fixture
def settings():
    return VeDistSettings(
        usdc_address=USDC,
        rpc_url="",
        block_pinning=True,
        logging=LoggingSettings(enable_file=False),
    )


@pytest.fixture
def chain():
    return FakeChainReader()


@pytest.fixture
def store():
    return InMemoryEntityStore()


@pytest.fixture
def injector(chain, store, settings):
    return Injector([FakeBindingsModule(chain, store, settings), ServiceModule(), EventModule()])


@pytest.fixture
def handler(injector):
    return injector.get(VeDistEventHandler)


@pytest.fixture
def seeded(store, chain):
    """预置分发器 / 控制器 / ve 锁仓 / 用户，以及对应的链上数据"""
    store.save(Distributor(id=DIST, ve=VE, controller=CONTROLLER, reward_token=REWARD_TOKEN, decimals=18))
    store.save(Controller(id=CONTROLLER, liquidator=LIQUIDATOR))
    store.save(GovernanceLock(id=VE, locked_amount_usd=Decimal('1000')))
    store.save(User(id=USER_ID, locked_amount_usd=Decimal('500')))

    last_token_time = 1_700_000_000
    week_start = last_token_time // 604800 * 604800
    chain.set_distributor(
        DIST,
        active_period=week_start,
        time_cursor=week_start + 604800,
        token_last_balance=40 * E18,
        last_token_time=last_token_time,
        tokens_per_week={week_start: 100 * E18},
    )
    chain.balances[(REWARD_TOKEN, DIST)] = 45 * E18
    chain.prices[(LIQUIDATOR, REWARD_TOKEN)] = 2 * E18
    return store
