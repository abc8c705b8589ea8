"""
APR计算器 - APR Calculator

根据一段时间内获得的奖励计算年化APR
"""

from decimal import Decimal

from ..domain.constants import SECONDS_PER_YEAR


class APRCalculator:
    """
    APR计算器

    公式：
    APR = 收益USD / 本金USD × (一年秒数 / 经过秒数) × 100

    说明：
    - 一年按365天计算
    - 本金为0或经过时间不为正时，APR为0
    """

    SECONDS_PER_YEAR = Decimal(SECONDS_PER_YEAR)
    PERCENT = Decimal('100')

    @staticmethod
    def calculate(
        last_time: int,
        current_time: int,
        earned_usd: Decimal,
        principal_usd: Decimal
    ) -> Decimal:
        """
        计算年化APR

        Args:
            last_time: 区间开始时间（秒）
            current_time: 区间结束时间（秒）
            earned_usd: 区间内收益（USD）
            principal_usd: 本金（USD），即锁仓价值

        Returns:
            年化APR（%）

        示例：
            收益 = 100 USD, 本金 = 1000 USD, 区间 = 1周

            APR = 100 / 1000 × (31536000 / 604800) × 100
                ≈ 521.43%
        """
        if principal_usd <= 0:
            return Decimal('0')

        elapsed = int(current_time) - int(last_time)
        if elapsed <= 0:
            return Decimal('0')

        yearly_factor = APRCalculator.SECONDS_PER_YEAR / Decimal(elapsed)
        return earned_usd / principal_usd * yearly_factor * APRCalculator.PERCENT
