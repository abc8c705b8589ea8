"""价格服务接口"""

from abc import ABC, abstractmethod
from decimal import Decimal


class IPriceOracle(ABC):
    """美元价格服务接口"""

    @abstractmethod
    def get_usd_price(self, liquidator: str, asset: str, decimals: int) -> Decimal:
        """
        获取1个单位资产的美元价格

        Args:
            liquidator: liquidator 合约地址
            asset: 资产地址
            decimals: 资产精度

        Returns:
            美元价格，查询失败时返回0
        """
        pass
