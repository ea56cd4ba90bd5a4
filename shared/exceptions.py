"""
附件存储异常定义
"""

from typing import Optional


class AttachmentError(Exception):
    """Base exception for attachment storage errors."""
    pass


class FileOperationError(AttachmentError):
    """文件操作失败，携带对象键和原始异常"""

    def __init__(self, message: str, key: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.message = message
        self.key = key
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class MissingPropertyError(AttachmentError):
    """必需的配置项缺失"""

    def __init__(self, property_key: str):
        self.property_key = property_key
        super().__init__(f"配置项 {property_key} 未设置")
