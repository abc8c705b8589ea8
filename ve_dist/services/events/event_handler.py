"""
ve 分发器事件处理器

按事件类型分发到处理函数，同步逐个处理。
处理函数抛出的异常会记录后继续向上抛出，当前事件视为失败，已写入的实体全部回滚。
"""

from typing import Dict, List, Callable, Optional, Any
from dataclasses import dataclass
from datetime import datetime
from injector import inject, singleton

from ...domain.models import Controller, Distributor, User, generate_ve_user_id
from ...infrastructure.config_manager import VeDistSettings
from ...logging import get_system_logger, get_indexing_logger, get_error_logger
from ..implementations.distributor_state_updater import DistributorStateUpdater
from ..implementations.user_reward_recorder import UserRewardRecorder
from ..interfaces.chain_reader import IChainReader
from ..interfaces.entity_store import IEntityStore
from ..interfaces.price_oracle import IPriceOracle
from .event import (
    Event, VeDistEvent, CheckpointTokenEvent, ClaimedEvent,
    RevisionIncreasedEvent, UpgradedEvent
)


# 事件回调类型定义
EventCallback = Callable[[Event], None]


@dataclass
class EventSubscription:
    """事件订阅记录"""
    event_type: str
    callback: EventCallback
    subscriber_id: str
    created_at: datetime


@singleton
class VeDistEventHandler:
    """
    ve 分发器事件处理器

    默认订阅：
    - CheckpointTokenEvent -> 刷新分发器状态
    - ClaimedEvent -> 记录用户领取 + 刷新分发器状态
    - RevisionIncreasedEvent -> 设置版本号
    - UpgradedEvent -> 追加实现地址
    """

    @inject
    def __init__(
        self,
        store: IEntityStore,
        chain_reader: IChainReader,
        price_oracle: IPriceOracle,
        updater: DistributorStateUpdater,
        recorder: UserRewardRecorder,
        settings: VeDistSettings
    ):
        self.name = "VeDistEventHandler"
        self.store = store
        self.chain_reader = chain_reader
        self.price_oracle = price_oracle
        self.updater = updater
        self.recorder = recorder
        self.settings = settings

        self.logger = get_system_logger()
        self.indexing_logger = get_indexing_logger()
        self.error_logger = get_error_logger()

        # 事件订阅管理
        self._subscriptions: Dict[str, List[EventSubscription]] = {}
        self._subscriber_counters: Dict[str, int] = {}

        # 统计信息
        self._stats = {
            'events_published': 0,
            'events_processed': 0,
            'errors': 0,
            'subscribers': 0
        }

        self._register_default_handlers()
        self.logger.info(f"事件处理器初始化完成: {self.name}")

    def _register_default_handlers(self):
        self.subscribe(CheckpointTokenEvent.__name__, self.handle_checkpoint_token, "checkpoint_token")
        self.subscribe(ClaimedEvent.__name__, self.handle_claimed, "claimed")
        self.subscribe(RevisionIncreasedEvent.__name__, self.handle_revision_increased, "revision_increased")
        self.subscribe(UpgradedEvent.__name__, self.handle_upgraded, "upgraded")

    # ***************************************************
    #                    订阅管理
    # ***************************************************

    def subscribe(self, event_type: str, callback: EventCallback,
                  subscriber_id: Optional[str] = None) -> str:
        """
        订阅事件

        Args:
            event_type: 事件类型（事件类名）
            callback: 同步回调函数
            subscriber_id: 订阅者ID（可选）

        Returns:
            订阅ID
        """
        if subscriber_id is None:
            counter = self._subscriber_counters.get(event_type, 0) + 1
            self._subscriber_counters[event_type] = counter
            subscriber_id = f"{event_type}_subscriber_{counter}"

        subscription = EventSubscription(
            event_type=event_type,
            callback=callback,
            subscriber_id=subscriber_id,
            created_at=datetime.now()
        )

        self._subscriptions.setdefault(event_type, []).append(subscription)
        self._stats['subscribers'] += 1

        self.logger.debug(f"新增订阅: {event_type} <- {subscriber_id}")
        return subscriber_id

    def unsubscribe(self, event_type: str, subscriber_id: str) -> bool:
        """取消订阅"""
        subscriptions = self._subscriptions.get(event_type)
        if not subscriptions:
            return False

        for i, subscription in enumerate(subscriptions):
            if subscription.subscriber_id == subscriber_id:
                subscriptions.pop(i)
                self._stats['subscribers'] -= 1
                self.logger.debug(f"取消订阅: {event_type} <- {subscriber_id}")

                if not subscriptions:
                    del self._subscriptions[event_type]

                return True

        return False

    # ***************************************************
    #                    事件发布
    # ***************************************************

    def publish(self, event: Event) -> None:
        """
        发布事件，按订阅顺序同步执行所有回调

        Raises:
            回调抛出的任何异常（已记录错误日志）
        """
        if not isinstance(event, Event):
            self.logger.warning(f"不支持的事件类型: {type(event)}")
            return

        self._stats['events_published'] += 1

        subscriptions = self._subscriptions.get(event.event_type, [])
        if not subscriptions:
            self.logger.warning(f"没有订阅者的事件: {event.event_type}")
            return

        pinned = (
            self.settings.block_pinning
            and isinstance(event, VeDistEvent)
            and event.block_number > 0
        )
        if pinned:
            self.chain_reader.use_block(event.block_number)

        try:
            # 一个事件的全部写入作为一个事务，任一回调失败则整体回滚
            with self.store.transaction():
                for subscription in list(subscriptions):
                    subscription.callback(event)
        except Exception as e:
            self._stats['errors'] += 1
            self.error_logger.exception(e, context=f"{event.event_type} {event.source}")
            raise
        finally:
            if pinned:
                self.chain_reader.use_block("latest")

        self._stats['events_processed'] += 1
        if isinstance(event, VeDistEvent):
            self.indexing_logger.event_handled(event.event_type, event.address, event.block_number)

    # ***************************************************
    #                    主要逻辑
    # ***************************************************

    def handle_checkpoint_token(self, event: CheckpointTokenEvent) -> None:
        distributor = self._get_distributor(event.address)
        reward_price = self._get_reward_price(distributor)
        self.updater.refresh(distributor, reward_price)

    def handle_claimed(self, event: ClaimedEvent) -> None:
        distributor = self._get_distributor(event.address)
        user = self.store.require(User, generate_ve_user_id(event.token_id, distributor.ve))
        reward_price = self._get_reward_price(distributor)

        self.recorder.record_claim(
            user,
            event.amount,
            reward_price,
            event.block_timestamp,
            decimals=distributor.decimals
        )

        self.updater.refresh(distributor, reward_price)

    # ***************************************************
    #                    属性变更
    # ***************************************************

    def handle_revision_increased(self, event: RevisionIncreasedEvent) -> None:
        distributor = self._get_distributor(event.address)
        distributor.revision = int(event.value)
        self.store.save(distributor)

    def handle_upgraded(self, event: UpgradedEvent) -> None:
        distributor = self._get_distributor(event.address)
        distributor.implementations.append(event.implementation)
        self.store.save(distributor)

    # ***************************************************
    #                    辅助方法
    # ***************************************************

    def _get_distributor(self, address: str) -> Distributor:
        return self.store.require(Distributor, address.lower())

    def _get_reward_price(self, distributor: Distributor):
        controller = self.store.require(Controller, distributor.controller)
        return self.price_oracle.get_usd_price(
            controller.liquidator, distributor.reward_token, distributor.decimals
        )

    def get_stats(self) -> Dict[str, Any]:
        """获取统计信息"""
        return {
            'name': self.name,
            'events_published': self._stats['events_published'],
            'events_processed': self._stats['events_processed'],
            'errors': self._stats['errors'],
            'subscribers': self._stats['subscribers'],
            'event_types': list(self._subscriptions.keys()),
        }

    def get_subscriptions(self) -> Dict[str, List[str]]:
        """获取所有订阅信息"""
        return {
            event_type: [sub.subscriber_id for sub in subscriptions]
            for event_type, subscriptions in self._subscriptions.items()
        }
