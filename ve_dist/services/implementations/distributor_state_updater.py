"""
分发器状态更新

每次 checkpoint / claim 后重新读取分发合约状态并重新计算分发器APR
"""

from decimal import Decimal
from injector import inject, singleton

from ..apr_calculator import APRCalculator
from ..interfaces.chain_reader import IChainReader
from ..interfaces.entity_store import IEntityStore
from ...domain.constants import WEEK
from ...domain.models import Distributor, GovernanceLock, format_units
from ...logging import get_indexing_logger


@singleton
class DistributorStateUpdater:
    """分发器状态更新器"""

    @inject
    def __init__(self, chain_reader: IChainReader, store: IEntityStore):
        self.chain_reader = chain_reader
        self.store = store
        self.logger = get_indexing_logger()

    @staticmethod
    def week_start(timestamp: int) -> int:
        """向下取整到周起点"""
        return timestamp // WEEK * WEEK

    def refresh(self, distributor: Distributor, reward_price_usd: Decimal) -> Distributor:
        """
        刷新分发器状态并保存

        Args:
            distributor: 分发器实体
            reward_price_usd: 奖励代币美元价格

        Returns:
            更新后的分发器实体
        """
        reader = self.chain_reader
        address = distributor.id
        decimals = distributor.decimals

        distributor.active_period = reader.active_period(address)
        distributor.time_cursor = reader.time_cursor(address)
        distributor.token_last_balance = format_units(reader.token_last_balance(address), decimals)
        distributor.token_balance = format_units(reader.balance_of(distributor.reward_token, address), decimals)
        distributor.last_token_time = reader.last_token_time(address)

        this_week = self.week_start(distributor.last_token_time)
        distributor.tokens_per_week = format_units(reader.tokens_per_week(address, this_week), decimals)

        # 以本周发放量按一周折算年化，不使用距上次更新的实际时间
        ve = self.store.require(GovernanceLock, distributor.ve)
        distributor.apr = APRCalculator.calculate(
            0,
            WEEK,
            distributor.tokens_per_week * reward_price_usd,
            ve.locked_amount_usd
        )

        self.store.save(distributor)
        self.logger.distributor_refreshed(
            address, distributor.apr, distributor.tokens_per_week,
            week_start=this_week, price=reward_price_usd
        )
        return distributor
