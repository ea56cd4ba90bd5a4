"""
文件处理器注册表
按附件存储类型选择对应的文件处理器
"""

import logging
from typing import Dict, Iterable, Optional

from shared.config import AppConfig, get_settings
from shared.exceptions import FileOperationError
from shared.utils import LoggerUtils
from ..options import OptionSource
from .base_handler import FileHandler, AttachmentType, MultipartFile, UploadResult
from .aliyun_handler import AliYunFileHandler

logger = logging.getLogger(__name__)


class FileHandlers:
    """文件处理器注册表"""

    def __init__(self, handlers: Optional[Iterable[FileHandler]] = None,
                 default_type: AttachmentType = AttachmentType.ALIYUN,
                 max_file_size_mb: Optional[int] = None):
        self.file_handlers: Dict[AttachmentType, FileHandler] = {}
        self.default_type = default_type
        self.max_file_size_mb = max_file_size_mb
        if handlers:
            self.add_file_handlers(handlers)

    def add_file_handlers(self, handlers: Iterable[FileHandler]) -> "FileHandlers":
        """注册文件处理器，按其支持的存储类型建立映射"""
        for handler in handlers:
            for attachment_type in AttachmentType:
                if handler.support_type(attachment_type):
                    self.file_handlers[attachment_type] = handler
                    logger.debug(f"文件处理器已注册: {attachment_type.name} -> {type(handler).__name__}")
        return self

    def get_supported_type(self, attachment_type: Optional[AttachmentType] = None) -> FileHandler:
        """获取支持指定存储类型的文件处理器，未指定时使用默认类型"""
        if attachment_type is None:
            attachment_type = self.default_type
        handler = self.file_handlers.get(attachment_type)
        if handler is None:
            raise FileOperationError(f"没有可用的文件处理器: {attachment_type.name}")
        return handler

    def validate_file_size(self, size: int) -> bool:
        """验证文件大小，未设置上限时不限制"""
        if self.max_file_size_mb is None:
            return True
        return size <= self.max_file_size_mb * 1024 * 1024

    async def upload(self, file: MultipartFile, attachment_type: Optional[AttachmentType] = None) -> UploadResult:
        """上传文件"""
        if file is None:
            raise ValueError("上传文件不能为空")
        if not self.validate_file_size(file.size):
            raise FileOperationError(
                f"附件 {file.original_filename} 大小超过限制 {self.max_file_size_mb}MB")
        return await self.get_supported_type(attachment_type).upload(file)

    async def delete(self, key: str, attachment_type: Optional[AttachmentType] = None) -> None:
        """删除文件"""
        if key is None:
            raise ValueError("文件键不能为空")
        await self.get_supported_type(attachment_type).delete(key)


def create_file_handlers(option_source: OptionSource,
                         settings: Optional[AppConfig] = None) -> FileHandlers:
    """创建默认的文件处理器注册表"""
    settings = settings or get_settings()
    LoggerUtils.setup_logger("storage", settings.monitoring.log_level)

    try:
        default_type = AttachmentType[settings.attachment.type]
    except KeyError:
        raise ValueError(f"不支持的附件存储类型: {settings.attachment.type}") from None

    file_handlers = FileHandlers(
        [AliYunFileHandler(option_source)],
        default_type=default_type,
        max_file_size_mb=settings.attachment.max_file_size_mb
    )
    logger.info(f"文件处理器初始化完成，支持: {[t.name for t in file_handlers.file_handlers]}")
    return file_handlers
