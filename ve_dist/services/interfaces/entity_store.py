"""
实体存储接口

实体以值的方式读取：修改后必须显式 save 才会生效
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional, List, Type, TypeVar


T = TypeVar('T')


class IEntityStore(ABC):
    """实体存储接口"""

    @abstractmethod
    def load(self, entity_type: Type[T], entity_id: str) -> Optional[T]:
        """读取实体，不存在返回 None"""
        pass

    @abstractmethod
    def require(self, entity_type: Type[T], entity_id: str) -> T:
        """读取实体，不存在抛出 EntityNotFoundError"""
        pass

    @abstractmethod
    def save(self, entity: Any) -> None:
        """写入（插入或覆盖）"""
        pass

    @abstractmethod
    def create(self, entity: Any) -> bool:
        """仅当ID不存在时插入，返回是否插入"""
        pass

    @abstractmethod
    def all(self, entity_type: Type[T]) -> List[T]:
        """获取某类型全部实体"""
        pass

    @abstractmethod
    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """获取存储快照 {实体类型: {ID: 字段字典}}"""
        pass

    @abstractmethod
    def begin(self) -> None:
        """开始事务：之后的写入在 commit 前可整体回滚"""
        pass

    @abstractmethod
    def commit(self) -> None:
        """提交事务"""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """回滚事务，丢弃 begin 之后的全部写入"""
        pass

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """事务上下文：正常退出提交，抛出异常时回滚后继续抛出"""
        self.begin()
        try:
            yield
        except BaseException:
            self.rollback()
            raise
        self.commit()
