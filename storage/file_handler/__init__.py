"""
文件处理器包
提供附件上传、删除功能
"""

from .base_handler import FileHandler, AttachmentType, MultipartFile, UploadResult
from .aliyun_handler import AliYunFileHandler
from .handler_registry import FileHandlers, create_file_handlers

__all__ = [
    "FileHandler",
    "AttachmentType",
    "MultipartFile",
    "UploadResult",
    "AliYunFileHandler",
    "FileHandlers",
    "create_file_handlers"
]
