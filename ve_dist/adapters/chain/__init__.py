from .web3_reader import Web3ChainReader
from .abis import VE_DISTRIBUTOR_ABI, ERC20_ABI, LIQUIDATOR_ABI

__all__ = ['Web3ChainReader', 'VE_DISTRIBUTOR_ABI', 'ERC20_ABI', 'LIQUIDATOR_ABI']
