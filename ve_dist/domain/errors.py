"""
异常定义

价格查询失败不在此列：预言机 revert 以 CallResult 返回并降级为0
"""


class VeDistError(Exception):
    """ve_dist 异常基类"""


class EntityNotFoundError(VeDistError):
    """实体缺失 - 前置条件被破坏，当前事件处理失败"""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found: {entity_id}")


class ChainReadError(VeDistError):
    """非价格类的链上读取失败，当前事件处理失败"""

    def __init__(self, method: str, address: str, reason: str = ""):
        self.method = method
        self.address = address
        self.reason = reason
        super().__init__(f"{method}() failed on {address}: {reason}")


class ConfigurationError(VeDistError):
    """配置错误"""


class UnsupportedEventError(VeDistError):
    """不支持的事件类型"""
