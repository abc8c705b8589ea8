"""
领域模型

定义分发器、ve 锁仓、用户及奖励历史等核心实体
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any
from decimal import Decimal, localcontext


ZERO = Decimal('0')


def format_units(value: int, decimals: int) -> Decimal:
    """将链上整数数量按精度转换为 Decimal（如 1500000, 6 -> 1.5）"""
    # 精度至少 34 位且能容纳原始整数，换算不舍入
    with localcontext() as ctx:
        ctx.prec = max(34, len(str(abs(int(value)))))
        return Decimal(value) / (Decimal(10) ** decimals)


def parse_units(value: Decimal, decimals: int) -> int:
    """将 Decimal 数量按精度转换为链上整数（如 1, 18 -> 10**18）"""
    return int(value * (Decimal(10) ** decimals))


def generate_ve_user_id(token_id: Any, ve_address: str) -> str:
    """生成 ve 用户ID：一个锁仓 NFT 在一个 ve 合约中对应一个用户"""
    return f"{token_id}_{ve_address.lower()}"


def generate_reward_history_id(user_id: str, timestamp: int) -> str:
    """生成奖励历史记录ID"""
    return f"{user_id}_{timestamp}"


class EntityMixin:
    """实体通用方法"""

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式，Decimal 以字符串保存避免精度丢失"""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Decimal):
                data[key] = str(value)
            else:
                data[key] = value
        return data


@dataclass
class Distributor(EntityMixin):
    """ve 奖励分发器（每个链上分发合约一个）"""
    id: str
    ve: str
    controller: str
    reward_token: str
    decimals: int
    active_period: int = 0
    time_cursor: int = 0
    token_last_balance: Decimal = ZERO
    token_balance: Decimal = ZERO
    last_token_time: int = 0
    tokens_per_week: Decimal = ZERO
    apr: Decimal = ZERO
    revision: int = 0
    # 升级记录，只追加
    implementations: List[str] = field(default_factory=list)

    def __post_init__(self):
        # 地址统一小写，与事件地址及用户ID一致
        self.id = self.id.lower()
        self.ve = self.ve.lower()
        self.controller = self.controller.lower()
        self.reward_token = self.reward_token.lower()


@dataclass
class GovernanceLock(EntityMixin):
    """ve 锁仓池，这里只读取锁仓总价值"""
    id: str
    locked_amount_usd: Decimal = ZERO

    def __post_init__(self):
        self.id = self.id.lower()


@dataclass
class Controller(EntityMixin):
    """控制器，持有 liquidator（价格预言机）地址"""
    id: str
    liquidator: str

    def __post_init__(self):
        self.id = self.id.lower()
        self.liquidator = self.liquidator.lower()


@dataclass
class User(EntityMixin):
    """ve 用户（token_id + ve 合约）"""
    id: str
    ve_dist_rewards_total: Decimal = ZERO
    ve_dist_last_apr: Decimal = ZERO
    ve_dist_last_claim: int = 0
    locked_amount_usd: Decimal = ZERO


@dataclass(frozen=True)
class UserRewardHistoryRecord(EntityMixin):
    """用户奖励领取历史，创建后不可修改"""
    id: str
    ve_user: str
    time: int
    claimed: Decimal
    claimed_usd: Decimal
    locked_amount_usd: Decimal
    apr: Decimal


@dataclass(frozen=True)
class CallResult:
    """
    合约只读调用结果

    用于可能 revert 的调用：调用方检查 reverted 而不是捕获异常
    """
    value: Optional[int] = None
    reverted: bool = False
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: int) -> 'CallResult':
        return cls(value=value)

    @classmethod
    def revert(cls, error: str = "") -> 'CallResult':
        return cls(reverted=True, error=error)


__all__ = [
    'ZERO',
    'format_units',
    'parse_units',
    'generate_ve_user_id',
    'generate_reward_history_id',
    'Distributor',
    'GovernanceLock',
    'Controller',
    'User',
    'UserRewardHistoryRecord',
    'CallResult',
]
