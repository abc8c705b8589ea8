"""
内存实体存储

保存实体副本：读取得到的是值，修改后需 save 才会写回
事务回滚恢复到 begin 时的全部表
"""

import copy
from typing import Dict, Any, Optional, List, Type, TypeVar
from injector import singleton

from ..interfaces.entity_store import IEntityStore
from ...domain.errors import EntityNotFoundError
from ...logging import get_logger


T = TypeVar('T')


@singleton
class InMemoryEntityStore(IEntityStore):
    """内存实体存储实现"""

    def __init__(self):
        self.logger = get_logger("ve_dist.store")
        self._tables: Dict[str, Dict[str, Any]] = {}
        # 事务开始时的表副本
        self._backup: Optional[Dict[str, Dict[str, Any]]] = None

    def _table(self, entity_type: Type) -> Dict[str, Any]:
        return self._tables.setdefault(entity_type.__name__, {})

    def load(self, entity_type: Type[T], entity_id: str) -> Optional[T]:
        entity = self._table(entity_type).get(entity_id)
        if entity is None:
            return None
        return copy.deepcopy(entity)

    def require(self, entity_type: Type[T], entity_id: str) -> T:
        entity = self.load(entity_type, entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_type.__name__, entity_id)
        return entity

    def save(self, entity: Any) -> None:
        self._table(type(entity))[entity.id] = copy.deepcopy(entity)

    def create(self, entity: Any) -> bool:
        table = self._table(type(entity))
        if entity.id in table:
            self.logger.debug(f"实体已存在，跳过写入: {type(entity).__name__} {entity.id}")
            return False
        table[entity.id] = copy.deepcopy(entity)
        return True

    def all(self, entity_type: Type[T]) -> List[T]:
        return [copy.deepcopy(e) for e in self._table(entity_type).values()]

    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        return {
            type_name: {entity_id: entity.to_dict() for entity_id, entity in table.items()}
            for type_name, table in self._tables.items()
        }

    def begin(self) -> None:
        if self._backup is not None:
            raise RuntimeError("事务已开始，不支持嵌套")
        self._backup = copy.deepcopy(self._tables)

    def commit(self) -> None:
        self._backup = None

    def rollback(self) -> None:
        if self._backup is None:
            return
        self._tables = self._backup
        self._backup = None
        self.logger.debug("事务已回滚")
