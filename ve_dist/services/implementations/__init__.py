from .entity_store_impl import InMemoryEntityStore
from .price_oracle_impl import PriceOracleImpl
from .distributor_state_updater import DistributorStateUpdater
from .user_reward_recorder import UserRewardRecorder

__all__ = ['InMemoryEntityStore', 'PriceOracleImpl', 'DistributorStateUpdater', 'UserRewardRecorder']
