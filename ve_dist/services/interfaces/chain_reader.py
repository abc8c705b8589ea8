"""
链上读取接口

定义事件处理所需的全部合约只读访问
"""

from abc import ABC, abstractmethod
from typing import Union

from ...domain.models import CallResult


BlockIdentifier = Union[int, str]


class IChainReader(ABC):
    """链上只读访问接口"""

    @abstractmethod
    def use_block(self, block_identifier: BlockIdentifier) -> None:
        """后续读取固定在指定区块（'latest' 取消固定）"""
        pass

    # ---- 分发器合约 ----

    @abstractmethod
    def active_period(self, distributor: str) -> int:
        pass

    @abstractmethod
    def time_cursor(self, distributor: str) -> int:
        pass

    @abstractmethod
    def token_last_balance(self, distributor: str) -> int:
        pass

    @abstractmethod
    def last_token_time(self, distributor: str) -> int:
        pass

    @abstractmethod
    def tokens_per_week(self, distributor: str, week_start: int) -> int:
        pass

    # ---- ERC20 ----

    @abstractmethod
    def balance_of(self, token: str, holder: str) -> int:
        pass

    # ---- 价格预言机 ----

    @abstractmethod
    def get_price(self, liquidator: str, asset: str, quote_asset: str, amount_in: int) -> CallResult:
        """
        查询 amount_in 数量的 asset 以 quote_asset 计价的价格

        调用 revert 时返回 CallResult.revert(...)，不抛异常
        """
        pass
