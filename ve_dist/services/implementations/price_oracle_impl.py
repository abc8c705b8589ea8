"""
价格服务实现

通过 liquidator 合约查询资产的 USDC 价格
"""

from decimal import Decimal
from injector import inject, singleton

from ..interfaces.chain_reader import IChainReader
from ..interfaces.price_oracle import IPriceOracle
from ...domain.models import format_units, parse_units
from ...infrastructure.config_manager import VeDistSettings
from ...logging import get_logger


@singleton
class PriceOracleImpl(IPriceOracle):
    """价格服务实现 - 查询失败降级为0，不中断事件处理"""

    @inject
    def __init__(self, chain_reader: IChainReader, settings: VeDistSettings):
        self.chain_reader = chain_reader
        self.usdc_address = settings.usdc_address.lower()
        self.logger = get_logger("ve_dist.price_oracle")

    def get_usd_price(self, liquidator: str, asset: str, decimals: int) -> Decimal:
        if asset.lower() == self.usdc_address:
            return Decimal('1')

        result = self.chain_reader.get_price(
            liquidator,
            asset,
            self.usdc_address,
            parse_units(Decimal('1'), decimals)
        )
        if not result.reverted:
            return format_units(result.value, decimals)

        self.logger.error(
            f"=== 价格获取失败 === liquidator: {liquidator} asset: {asset}",
            reason=result.error or ""
        )
        return Decimal('0')
