from injector import Module

from ve_dist.domain.errors import ChainReadError
from ve_dist.domain.models import CallResult, generate_ve_user_id
from ve_dist.infrastructure.config_manager import VeDistSettings
from ve_dist.services.interfaces import IChainReader, IEntityStore


USDC = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
DIST = "0x" + "d1" * 20
VE = "0x" + "ee" * 20
CONTROLLER = "0x" + "c0" * 20
LIQUIDATOR = "0x" + "11" * 20
REWARD_TOKEN = "0x" + "aa" * 20
TOKEN_ID = 7
USER_ID = generate_ve_user_id(TOKEN_ID, VE)

E18 = 10 ** 18


class FakeChainReader(IChainReader):
    """可编程的链上读取，按地址返回预设值"""

    def __init__(self):
        self.distributors = {}
        self.balances = {}
        self.prices = {}
        self.failing = set()
        self.price_calls = []
        self.tokens_per_week_calls = []
        self.blocks = []

    def set_distributor(self, address, active_period=0, time_cursor=0, token_last_balance=0,
                        last_token_time=0, tokens_per_week=None):
        self.distributors[address] = {
            'activePeriod': active_period,
            'timeCursor': time_cursor,
            'tokenLastBalance': token_last_balance,
            'lastTokenTime': last_token_time,
            'tokensPerWeek': tokens_per_week or {},
        }

    def _read(self, address, method):
        if method in self.failing:
            raise ChainReadError(method, address, "execution reverted")
        return self.distributors[address][method]

    def use_block(self, block_identifier):
        self.blocks.append(block_identifier)

    def active_period(self, distributor):
        return self._read(distributor, 'activePeriod')

    def time_cursor(self, distributor):
        return self._read(distributor, 'timeCursor')

    def token_last_balance(self, distributor):
        return self._read(distributor, 'tokenLastBalance')

    def last_token_time(self, distributor):
        return self._read(distributor, 'lastTokenTime')

    def tokens_per_week(self, distributor, week_start):
        self.tokens_per_week_calls.append(week_start)
        return self._read(distributor, 'tokensPerWeek').get(week_start, 0)

    def balance_of(self, token, holder):
        if 'balanceOf' in self.failing:
            raise ChainReadError('balanceOf', token, "execution reverted")
        return self.balances.get((token, holder), 0)

    def get_price(self, liquidator, asset, quote_asset, amount_in):
        self.price_calls.append((liquidator, asset, quote_asset, amount_in))
        price = self.prices.get((liquidator, asset))
        if price is None:
            return CallResult.revert("execution reverted")
        return CallResult.ok(price)


class FakeBindingsModule(Module):
    """用假实现替换链上读取、存储与配置"""

    def __init__(self, chain_reader, store, settings):
        self.chain_reader = chain_reader
        self.store = store
        self.settings = settings

    def configure(self, binder):
        binder.bind(IChainReader, to=self.chain_reader)
        binder.bind(IEntityStore, to=self.store)
        binder.bind(VeDistSettings, to=self.settings)
