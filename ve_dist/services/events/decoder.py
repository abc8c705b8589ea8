"""
事件解码

把 web3 解码后的合约日志（contract.events.X().process_log 的结果）转换为事件对象
"""

from typing import Any, Mapping, Optional
from web3 import Web3

from ...domain.errors import UnsupportedEventError
from .event import (
    VeDistEvent, CheckpointTokenEvent, ClaimedEvent,
    RevisionIncreasedEvent, UpgradedEvent
)


class VeDistEventDecoder:
    """ve 分发合约事件解码器"""

    SUPPORTED_EVENTS = ('CheckpointToken', 'Claimed', 'RevisionIncreased', 'Upgraded')

    def decode(self, log: Mapping[str, Any], block_timestamp: int) -> VeDistEvent:
        """
        解码单条日志

        Args:
            log: 包含 event / args / address / blockNumber / transactionHash 的日志
            block_timestamp: 日志所在区块时间

        Raises:
            UnsupportedEventError: 事件名不在支持列表中
        """
        name = log.get('event')
        args = log.get('args') or {}
        common = {
            'address': str(log['address']),
            'block_number': int(log.get('blockNumber') or 0),
            'block_timestamp': int(block_timestamp),
            'tx_hash': self._to_hex(log.get('transactionHash')),
        }

        if name == 'CheckpointToken':
            return CheckpointTokenEvent(
                time=self._optional_int(args.get('time')),
                tokens=self._optional_int(args.get('tokens')),
                **common
            )
        if name == 'Claimed':
            return ClaimedEvent(token_id=int(args['tokenId']), amount=int(args['amount']), **common)
        if name == 'RevisionIncreased':
            old_logic = args.get('oldLogic')
            return RevisionIncreasedEvent(
                value=int(args['value']),
                old_logic=str(old_logic).lower() if old_logic else None,
                **common
            )
        if name == 'Upgraded':
            return UpgradedEvent(implementation=str(args['implementation']), **common)

        raise UnsupportedEventError(f"不支持的事件: {name}")

    @staticmethod
    def _optional_int(value: Any) -> Optional[int]:
        return int(value) if value is not None else None

    @staticmethod
    def _to_hex(value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        return Web3.to_hex(value)
