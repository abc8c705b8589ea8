from .chain_reader import IChainReader, BlockIdentifier
from .entity_store import IEntityStore
from .price_oracle import IPriceOracle

__all__ = ['IChainReader', 'BlockIdentifier', 'IEntityStore', 'IPriceOracle']
