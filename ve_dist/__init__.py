"""
ve_dist - ve 奖励分发器事件处理

对分发合约的 CheckpointToken / Claimed / RevisionIncreased / Upgraded 事件：
- 读取链上状态
- 计算奖励代币美元价格与APR
- 更新分发器、用户及奖励历史实体

主要组件：
- di: 依赖注入容器
- services: 价格、APR、状态更新、奖励记录、事件处理
- domain: 领域模型
- adapters: web3 链上读取
- infrastructure: 配置
"""

__version__ = "1.0.0"

from .di.container import get_container, DIContainer
from .services.events import VeDistEventHandler, VeDistEventDecoder
from .services.apr_calculator import APRCalculator

__all__ = [
    "get_container",
    "DIContainer",
    "VeDistEventHandler",
    "VeDistEventDecoder",
    "APRCalculator",
]
