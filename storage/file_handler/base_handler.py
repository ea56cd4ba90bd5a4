"""
文件处理器基础接口
定义附件上传、删除的通用接口和数据结构
"""

from abc import ABC, abstractmethod
from typing import Optional, BinaryIO, Tuple
from dataclasses import dataclass
from enum import Enum
from io import BytesIO

from PIL import Image

from shared.utils import MediaTypeUtils


class AttachmentType(Enum):
    """附件存储类型枚举"""
    LOCAL = 0
    UPYUN = 1
    QINIUYUN = 2
    SMMS = 3
    ALIYUN = 4
    BAIDUYUN = 5
    TENCENTYUN = 6


@dataclass
class MultipartFile:
    """待上传的文件"""
    original_filename: str
    content_type: Optional[str]
    size: int
    stream: BinaryIO

    @classmethod
    def from_bytes(cls, filename: str, data: bytes,
                   content_type: Optional[str] = None) -> "MultipartFile":
        """从字节内容构建上传文件"""
        return cls(
            original_filename=filename,
            content_type=content_type or MediaTypeUtils.guess_media_type(filename),
            size=len(data),
            stream=BytesIO(data)
        )

    def get_stream(self) -> BinaryIO:
        """获取从头开始读取的文件流"""
        self.stream.seek(0)
        return self.stream


@dataclass(frozen=True)
class UploadResult:
    """上传结果"""
    filename: Optional[str] = None
    key: Optional[str] = None
    file_path: Optional[str] = None
    thumb_path: Optional[str] = None
    media_type: Optional[str] = None
    suffix: Optional[str] = None
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None


class FileHandler(ABC):
    """文件处理器抽象类"""

    @abstractmethod
    async def upload(self, file: MultipartFile) -> UploadResult:
        """上传文件"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """按对象键删除文件"""
        pass

    @abstractmethod
    def support_type(self, attachment_type: AttachmentType) -> bool:
        """是否支持指定的附件存储类型"""
        pass

    @staticmethod
    def is_image_type(media_type: Optional[str]) -> bool:
        """判断媒体类型是否为图片"""
        return MediaTypeUtils.is_image_type(media_type)

    @staticmethod
    def read_image_size(stream: BinaryIO) -> Tuple[int, int]:
        """解码图片获取宽高"""
        with Image.open(stream) as image:
            width, height = image.size
        return width, height
