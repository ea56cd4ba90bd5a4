"""
文件处理器注册表单元测试
"""

import pytest
from unittest.mock import Mock, AsyncMock

from shared.config import AppConfig, AttachmentConfig, MonitoringConfig
from shared.exceptions import FileOperationError
from storage.file_handler import (
    FileHandlers, AliYunFileHandler, AttachmentType, MultipartFile, UploadResult,
    create_file_handlers
)
from storage.options import InMemoryOptionSource


def make_handler(supported: AttachmentType):
    handler = Mock()
    handler.support_type.side_effect = lambda t: t is supported
    handler.upload = AsyncMock(return_value=UploadResult(key='k.txt'))
    handler.delete = AsyncMock(return_value=None)
    return handler


class TestFileHandlers:
    """文件处理器注册表测试"""

    @pytest.fixture
    def aliyun_handler(self):
        return make_handler(AttachmentType.ALIYUN)

    @pytest.fixture
    def local_handler(self):
        return make_handler(AttachmentType.LOCAL)

    @pytest.fixture
    def file_handlers(self, aliyun_handler, local_handler):
        return FileHandlers([aliyun_handler, local_handler])

    @pytest.fixture
    def upload_file(self):
        return MultipartFile.from_bytes('a.txt', b'content')

    def test_register_by_supported_type(self, file_handlers, aliyun_handler, local_handler):
        """测试按支持类型注册"""
        assert file_handlers.get_supported_type(AttachmentType.ALIYUN) is aliyun_handler
        assert file_handlers.get_supported_type(AttachmentType.LOCAL) is local_handler
        assert set(file_handlers.file_handlers) == {AttachmentType.ALIYUN, AttachmentType.LOCAL}

    def test_default_type(self, file_handlers, aliyun_handler):
        """测试未指定类型时使用默认类型"""
        assert file_handlers.get_supported_type() is aliyun_handler

    def test_unsupported_type(self, file_handlers):
        """测试没有可用处理器"""
        with pytest.raises(FileOperationError):
            file_handlers.get_supported_type(AttachmentType.SMMS)

    @pytest.mark.asyncio
    async def test_upload_dispatch(self, file_handlers, aliyun_handler, local_handler, upload_file):
        """测试上传分发"""
        result = await file_handlers.upload(upload_file, AttachmentType.LOCAL)

        assert result.key == 'k.txt'
        local_handler.upload.assert_awaited_once_with(upload_file)
        aliyun_handler.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_dispatch(self, file_handlers, aliyun_handler):
        """测试删除分发"""
        await file_handlers.delete('k.txt', AttachmentType.ALIYUN)

        aliyun_handler.delete.assert_awaited_once_with('k.txt')

    @pytest.mark.asyncio
    async def test_upload_none(self, file_handlers):
        """测试上传空文件"""
        with pytest.raises(ValueError):
            await file_handlers.upload(None, AttachmentType.ALIYUN)

    @pytest.mark.asyncio
    async def test_delete_none(self, file_handlers):
        """测试删除空键"""
        with pytest.raises(ValueError):
            await file_handlers.delete(None, AttachmentType.ALIYUN)

    def test_create_file_handlers(self):
        """测试创建默认注册表"""
        settings = AppConfig(
            attachment=AttachmentConfig(type='aliyun'),
            monitoring=MonitoringConfig(log_level='debug')
        )

        file_handlers = create_file_handlers(InMemoryOptionSource(), settings)

        assert file_handlers.default_type is AttachmentType.ALIYUN
        assert isinstance(file_handlers.get_supported_type(), AliYunFileHandler)

    @pytest.mark.asyncio
    async def test_upload_exceeds_size_limit(self, aliyun_handler):
        """测试超过大小上限的文件被拒绝"""
        file_handlers = FileHandlers([aliyun_handler], max_file_size_mb=1)
        large_file = MultipartFile.from_bytes('big.bin', b'x' * (2 * 1024 * 1024))

        with pytest.raises(FileOperationError):
            await file_handlers.upload(large_file, AttachmentType.ALIYUN)

        aliyun_handler.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upload_within_size_limit(self, aliyun_handler, upload_file):
        """测试大小上限内的文件正常上传"""
        file_handlers = FileHandlers([aliyun_handler], max_file_size_mb=1)

        result = await file_handlers.upload(upload_file, AttachmentType.ALIYUN)

        assert result.key == 'k.txt'
        assert file_handlers.validate_file_size(1024 * 1024) is True
        assert file_handlers.validate_file_size(1024 * 1024 + 1) is False

    def test_create_file_handlers_size_limit(self):
        """测试注册表使用配置的大小上限"""
        settings = AppConfig(attachment=AttachmentConfig(max_file_size_mb=5))

        file_handlers = create_file_handlers(InMemoryOptionSource(), settings)

        assert file_handlers.max_file_size_mb == 5

    def test_create_file_handlers_unknown_type(self):
        """测试未知的附件存储类型"""
        settings = AppConfig(attachment=AttachmentConfig(type='ftp'))

        with pytest.raises(ValueError, match='FTP'):
            create_file_handlers(InMemoryOptionSource(), settings)
