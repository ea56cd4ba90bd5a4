"""
配置选项来源
为文件处理器提供附件存储配置，每次调用实时读取
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Union

from shared.config import AliYunOssSettings
from shared.exceptions import MissingPropertyError

PropertyKey = Union[str, Enum]


def _property_key(prop: PropertyKey) -> str:
    return prop.value if isinstance(prop, Enum) else prop


class OptionSource(ABC):
    """配置选项来源抽象类"""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """按键获取选项值，不存在时返回None"""
        pass

    def get_by_property_of_non_null(self, prop: PropertyKey) -> str:
        """获取必需的选项值，缺失或为空时抛出 MissingPropertyError"""
        key = _property_key(prop)
        value = self.get(key)
        if value is None or not str(value).strip():
            raise MissingPropertyError(key)
        return str(value)

    def get_by_property_or_default(self, prop: PropertyKey, default: str = "") -> str:
        """获取可选的选项值"""
        value = self.get(_property_key(prop))
        if value is None:
            return default
        return str(value)


class InMemoryOptionSource(OptionSource):
    """基于字典的选项来源"""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = dict(options or {})

    def get(self, key: str) -> Optional[Any]:
        return self.options.get(key)

    def set(self, prop: PropertyKey, value: Any):
        """设置选项值"""
        self.options[_property_key(prop)] = value

    def remove(self, prop: PropertyKey):
        """删除选项"""
        self.options.pop(_property_key(prop), None)


class SettingsOptionSource(OptionSource):
    """基于环境配置 (pydantic-settings) 的选项来源"""

    def __init__(self, settings: Optional[AliYunOssSettings] = None):
        self.settings = settings

    def get(self, key: str) -> Optional[Any]:
        # 未注入配置时每次重新加载环境变量
        settings = self.settings or AliYunOssSettings()
        return getattr(settings, key, None)
