"""
附件存储配置选项包
"""

from .option_source import OptionSource, InMemoryOptionSource, SettingsOptionSource
from .properties import AliYunProperties, AliYunOssClientConfig, AliYunOssConfig

__all__ = [
    "OptionSource",
    "InMemoryOptionSource",
    "SettingsOptionSource",
    "AliYunProperties",
    "AliYunOssClientConfig",
    "AliYunOssConfig"
]
