"""
共享工具函数
提供附件存储通用的工具函数和辅助类
"""

import time
import mimetypes
import logging
from typing import Optional


class FilenameUtils:
    """文件名处理工具类"""

    @staticmethod
    def _strip_directory(filename: str) -> str:
        """去掉路径部分，只保留文件名"""
        separator_index = max(filename.rfind('/'), filename.rfind('\\'))
        return filename[separator_index + 1:]

    @staticmethod
    def get_basename(filename: str) -> str:
        """获取不含扩展名的文件名"""
        if not filename:
            return ""
        name = FilenameUtils._strip_directory(filename)
        dot_index = name.rfind('.')
        if dot_index < 0:
            return name
        return name[:dot_index]

    @staticmethod
    def get_extension(filename: str) -> str:
        """获取文件扩展名 (不含点)"""
        if not filename:
            return ""
        name = FilenameUtils._strip_directory(filename)
        dot_index = name.rfind('.')
        if dot_index < 0:
            return ""
        return name[dot_index + 1:]


class MediaTypeUtils:
    """媒体类型工具类"""

    @staticmethod
    def guess_media_type(filename: str) -> str:
        """根据文件名推断MIME类型"""
        mime_type, _ = mimetypes.guess_type(filename or "")
        return mime_type or 'application/octet-stream'

    @staticmethod
    def is_image_type(media_type: Optional[str]) -> bool:
        """判断是否为图片类型"""
        if not media_type:
            return False
        return media_type.split(';', 1)[0].strip().lower().startswith('image/')


class UrlUtils:
    """URL处理工具类"""

    @staticmethod
    def append_if_missing(value: str, suffix: str) -> str:
        """末尾缺少后缀时追加"""
        return value if value.endswith(suffix) else value + suffix

    @staticmethod
    def join_url(base_url: str, path: str) -> str:
        """拼接URL，保证基础地址与路径之间只有一个分隔符"""
        return UrlUtils.append_if_missing(base_url, '/') + path.lstrip('/')


class TimeUtils:
    """时间处理工具类"""

    @staticmethod
    def current_millis() -> int:
        """获取当前Unix毫秒时间戳"""
        return int(time.time() * 1000)


class LoggerUtils:
    """日志工具类"""

    @staticmethod
    def setup_logger(name: str, level: str = 'INFO') -> logging.Logger:
        """设置日志记录器"""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger
