"""
web3 链上读取实现

所有读取都是 eth_call；非价格读取失败抛 ChainReadError，价格读取 revert 返回 CallResult
"""

from typing import Dict, Tuple
from injector import inject, singleton
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from ...domain.errors import ChainReadError
from ...domain.models import CallResult
from ...logging import get_error_logger
from ...services.interfaces.chain_reader import IChainReader, BlockIdentifier
from .abis import VE_DISTRIBUTOR_ABI, ERC20_ABI, LIQUIDATOR_ABI


@singleton
class Web3ChainReader(IChainReader):
    """基于 web3.py 的链上读取"""

    @inject
    def __init__(self, w3: Web3):
        self.w3 = w3
        self.block_identifier: BlockIdentifier = "latest"
        self.error_logger = get_error_logger()
        self._contracts: Dict[Tuple[str, str], object] = {}

    def use_block(self, block_identifier: BlockIdentifier) -> None:
        self.block_identifier = block_identifier

    def _contract(self, address: str, kind: str):
        key = (kind, address.lower())
        if key not in self._contracts:
            abi = {
                "distributor": VE_DISTRIBUTOR_ABI,
                "erc20": ERC20_ABI,
                "liquidator": LIQUIDATOR_ABI,
            }[kind]
            self._contracts[key] = self.w3.eth.contract(
                address=Web3.to_checksum_address(address),
                abi=abi,
            )
        return self._contracts[key]

    def _call(self, address: str, kind: str, method: str, *args) -> int:
        fn = getattr(self._contract(address, kind).functions, method)(*args)
        try:
            return fn.call(block_identifier=self.block_identifier)
        except Web3Exception as e:
            self.error_logger.chain_read_error(method, address, str(e), block=self.block_identifier)
            raise ChainReadError(method, address, str(e)) from e

    # ---- 分发器合约 ----

    def active_period(self, distributor: str) -> int:
        return self._call(distributor, "distributor", "activePeriod")

    def time_cursor(self, distributor: str) -> int:
        return self._call(distributor, "distributor", "timeCursor")

    def token_last_balance(self, distributor: str) -> int:
        return self._call(distributor, "distributor", "tokenLastBalance")

    def last_token_time(self, distributor: str) -> int:
        return self._call(distributor, "distributor", "lastTokenTime")

    def tokens_per_week(self, distributor: str, week_start: int) -> int:
        return self._call(distributor, "distributor", "tokensPerWeek", week_start)

    # ---- ERC20 ----

    def balance_of(self, token: str, holder: str) -> int:
        return self._call(token, "erc20", "balanceOf", Web3.to_checksum_address(holder))

    # ---- 价格预言机 ----

    def get_price(self, liquidator: str, asset: str, quote_asset: str, amount_in: int) -> CallResult:
        fn = self._contract(liquidator, "liquidator").functions.getPrice(
            Web3.to_checksum_address(asset),
            Web3.to_checksum_address(quote_asset),
            amount_in
        )
        try:
            return CallResult.ok(fn.call(block_identifier=self.block_identifier))
        except (ContractLogicError, BadFunctionCallOutput) as e:
            return CallResult.revert(str(e))
