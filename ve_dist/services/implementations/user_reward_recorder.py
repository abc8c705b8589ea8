"""
用户奖励记录

领取事件：累计用户奖励、计算本次领取APR、追加历史记录
"""

from decimal import Decimal
from typing import Optional
from injector import inject, singleton

from ..apr_calculator import APRCalculator
from ..interfaces.entity_store import IEntityStore
from ...domain.models import (
    User, UserRewardHistoryRecord, format_units, generate_reward_history_id
)
from ...logging import get_indexing_logger


@singleton
class UserRewardRecorder:
    """用户奖励记录器"""

    @inject
    def __init__(self, store: IEntityStore):
        self.store = store
        self.logger = get_indexing_logger()

    def record_claim(
        self,
        user: User,
        reward_amount_raw: int,
        reward_price_usd: Decimal,
        claim_timestamp: int,
        decimals: int
    ) -> Optional[UserRewardHistoryRecord]:
        """
        记录一次奖励领取

        Args:
            user: 用户实体
            reward_amount_raw: 链上领取数量（未按精度换算）
            reward_price_usd: 奖励代币美元价格
            claim_timestamp: 领取时间（区块时间）
            decimals: 奖励代币精度

        Returns:
            新建的历史记录；同一用户同一时间已有记录时返回 None
        """
        claimed = format_units(reward_amount_raw, decimals)
        claimed_usd = claimed * reward_price_usd

        user.ve_dist_rewards_total = user.ve_dist_rewards_total + claimed
        # APR 区间为上次领取到本次领取
        user.ve_dist_last_apr = APRCalculator.calculate(
            user.ve_dist_last_claim,
            claim_timestamp,
            claimed_usd,
            user.locked_amount_usd
        )
        user.ve_dist_last_claim = int(claim_timestamp)

        history = self._save_reward_history(user, claim_timestamp, claimed, claimed_usd)
        self.store.save(user)

        self.logger.claim_recorded(user.id, claimed, claimed_usd, user.ve_dist_last_apr,
                                   time=claim_timestamp)
        return history

    def _save_reward_history(
        self,
        user: User,
        timestamp: int,
        claimed: Decimal,
        claimed_usd: Decimal
    ) -> Optional[UserRewardHistoryRecord]:
        """追加历史记录，同一 (用户, 时间) 只写一次"""
        history = UserRewardHistoryRecord(
            id=generate_reward_history_id(user.id, timestamp),
            ve_user=user.id,
            time=int(timestamp),
            claimed=claimed,
            claimed_usd=claimed_usd,
            locked_amount_usd=user.locked_amount_usd,
            apr=user.ve_dist_last_apr,
        )
        if not self.store.create(history):
            self.logger.debug(f"历史记录已存在: {history.id}")
            return None
        return history
