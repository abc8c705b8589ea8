"""
事件定义

事件基类及 ve 分发合约的四种链上事件
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from abc import ABC
from decimal import Decimal


@dataclass
class Event(ABC):
    """
    事件基类

    所有事件都继承此基类，包含基础的事件元数据。
    """

    # 事件元数据
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(default="", init=False)
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # 事件来源信息
    source: Optional[str] = None

    # 额外的事件数据
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """设置事件类型为类名"""
        if not self.event_type:
            self.event_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """将事件转换为字典格式"""
        return {
            'event_id': self.event_id,
            'event_type': self.event_type,
            'received_at': self.received_at.isoformat(),
            'source': self.source,
            'metadata': self.metadata,
            'data': self._get_data()
        }

    def _get_data(self) -> Dict[str, Any]:
        """获取事件的业务数据"""
        base_fields = {'event_id', 'event_type', 'received_at', 'source', 'metadata'}

        data = {}
        for key, value in self.__dict__.items():
            if key not in base_fields:
                if isinstance(value, Decimal):
                    data[key] = str(value)
                elif isinstance(value, datetime):
                    data[key] = value.isoformat()
                else:
                    data[key] = value

        return data


@dataclass
class VeDistEvent(Event):
    """
    ve 分发合约事件

    address 为发出事件的分发合约地址（小写）
    """

    address: str = ""
    block_number: int = 0
    block_timestamp: int = 0
    tx_hash: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        self.address = self.address.lower()
        self.source = self.address


@dataclass
class CheckpointTokenEvent(VeDistEvent):
    """CheckpointToken(time, tokens)"""

    time: Optional[int] = None
    tokens: Optional[int] = None


@dataclass
class ClaimedEvent(VeDistEvent):
    """Claimed(tokenId, amount, ...)"""

    token_id: int = 0
    amount: int = 0


@dataclass
class RevisionIncreasedEvent(VeDistEvent):
    """RevisionIncreased(value, oldLogic)"""

    value: int = 0
    old_logic: Optional[str] = None


@dataclass
class UpgradedEvent(VeDistEvent):
    """Upgraded(implementation)"""

    implementation: str = ""

    def __post_init__(self):
        super().__post_init__()
        self.implementation = self.implementation.lower()
