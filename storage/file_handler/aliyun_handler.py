"""
阿里云OSS文件处理器
将附件上传到阿里云OSS或从中删除
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import BinaryIO, Dict, Iterator

import oss2

from shared.exceptions import FileOperationError
from shared.utils import FilenameUtils, TimeUtils, UrlUtils
from ..options import OptionSource, AliYunOssClientConfig, AliYunOssConfig
from .base_handler import FileHandler, AttachmentType, MultipartFile, UploadResult

logger = logging.getLogger(__name__)


class AliYunFileHandler(FileHandler):
    """阿里云OSS文件处理器

    每次调用都从选项来源读取最新配置，并为本次调用单独建立OSS会话，
    调用结束时无论成功与否都会关闭会话。
    """

    def __init__(self, option_source: OptionSource):
        self.option_source = option_source

    @contextmanager
    def _open_bucket(self, config: AliYunOssClientConfig) -> Iterator[oss2.Bucket]:
        """建立OSS会话，退出时关闭"""
        session = oss2.Session()
        try:
            auth = oss2.Auth(config.access_key, config.access_secret)
            yield oss2.Bucket(auth, config.endpoint, config.bucket_name, session=session)
        finally:
            session.session.close()

    @staticmethod
    def build_object_key(filename: str) -> str:
        """生成对象键: {basename}_{毫秒时间戳}.{extension}"""
        basename = FilenameUtils.get_basename(filename)
        extension = FilenameUtils.get_extension(filename)
        return f"{basename}_{TimeUtils.current_millis()}.{extension}"

    # 会话的建立与关闭都在执行器线程内完成，等待方被取消时不会提前关闭会话
    def _put_object(self, config: AliYunOssClientConfig, object_key: str,
                    stream: BinaryIO, headers: Dict[str, str]):
        with self._open_bucket(config) as bucket:
            return bucket.put_object(object_key, stream, headers=headers)

    def _delete_object(self, config: AliYunOssClientConfig, key: str):
        with self._open_bucket(config) as bucket:
            bucket.delete_object(key)

    async def upload(self, file: MultipartFile) -> UploadResult:
        """上传文件

        上传过程中的任何异常只记录日志，不向调用方抛出，此时返回字段全部为空的结果。
        """
        if file is None:
            raise ValueError("上传文件不能为空")

        config = AliYunOssConfig.from_options(self.option_source)

        basename = FilenameUtils.get_basename(file.original_filename)
        extension = FilenameUtils.get_extension(file.original_filename)
        object_key = self.build_object_key(file.original_filename)
        file_path = UrlUtils.join_url(config.base_url, object_key)

        headers = {}
        if file.content_type:
            headers['Content-Type'] = file.content_type

        upload_result = UploadResult()
        try:
            loop = asyncio.get_running_loop()
            result = await loop.run_in_executor(
                None, self._put_object, config, object_key, file.get_stream(), headers)
            if result is None:
                raise FileOperationError(
                    f"上传附件 {file.original_filename} 到阿里云失败", key=object_key)

            width = height = thumb_path = None
            if self.is_image_type(file.content_type):
                width, height = await loop.run_in_executor(
                    None, self.read_image_size, file.get_stream())
                thumb_path = file_path + config.thumbnail_style_rule \
                    if config.thumbnail_style_rule.strip() else file_path

            upload_result = UploadResult(
                filename=basename,
                key=object_key,
                file_path=file_path + config.style_rule if config.style_rule.strip() else file_path,
                thumb_path=thumb_path,
                media_type=file.content_type,
                suffix=extension,
                size=file.size,
                width=width,
                height=height
            )
        except Exception as e:
            # 失败时返回空结果，调用方只能通过字段是否为空判断
            logger.error(f"阿里云OSS附件上传失败: {file.original_filename}: {e}", exc_info=True)

        logger.info(f"附件 [{file.original_filename}] 上传成功")
        return upload_result

    async def delete(self, key: str) -> None:
        """按对象键删除文件"""
        if key is None:
            raise ValueError("文件键不能为空")

        config = AliYunOssClientConfig.from_options(self.option_source)

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._delete_object, config, key)
        except Exception as e:
            raise FileOperationError(f"附件 {key} 从阿里云删除失败", key=key, cause=e) from e

        logger.info(f"阿里云OSS附件删除成功: {config.bucket_name}/{key}")

    def support_type(self, attachment_type: AttachmentType) -> bool:
        return attachment_type is AttachmentType.ALIYUN
