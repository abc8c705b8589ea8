"""
事件模块

定义 ve 分发合约事件及同步事件处理器
"""

from .event import (
    Event, VeDistEvent, CheckpointTokenEvent, ClaimedEvent,
    RevisionIncreasedEvent, UpgradedEvent
)
from .event_handler import VeDistEventHandler, EventCallback
from .decoder import VeDistEventDecoder

__all__ = [
    'Event', 'VeDistEvent', 'CheckpointTokenEvent', 'ClaimedEvent',
    'RevisionIncreasedEvent', 'UpgradedEvent',
    'VeDistEventHandler', 'EventCallback', 'VeDistEventDecoder'
]
