"""
附件存储选项键与配置快照
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .option_source import OptionSource


class AliYunProperties(Enum):
    """阿里云OSS选项键"""
    OSS_PROTOCOL = "oss_aliyun_domain_protocol"
    OSS_DOMAIN = "oss_aliyun_domain"
    OSS_ENDPOINT = "oss_aliyun_endpoint"
    OSS_ACCESS_KEY = "oss_aliyun_access_key"
    OSS_ACCESS_SECRET = "oss_aliyun_access_secret"
    OSS_BUCKET_NAME = "oss_aliyun_bucket_name"
    OSS_STYLE_RULE = "oss_aliyun_style_rule"
    OSS_THUMBNAIL_STYLE_RULE = "oss_aliyun_thumbnail_style_rule"


class AliYunOssClientConfig(BaseModel):
    """建立OSS会话所需的配置"""
    model_config = ConfigDict(frozen=True)

    endpoint: str
    access_key: str
    access_secret: str
    bucket_name: str

    @classmethod
    def from_options(cls, source: OptionSource) -> "AliYunOssClientConfig":
        return cls(**cls.read_client_fields(source))

    @staticmethod
    def read_client_fields(source: OptionSource) -> dict:
        return {
            'endpoint': source.get_by_property_of_non_null(AliYunProperties.OSS_ENDPOINT),
            'access_key': source.get_by_property_of_non_null(AliYunProperties.OSS_ACCESS_KEY),
            'access_secret': source.get_by_property_of_non_null(AliYunProperties.OSS_ACCESS_SECRET),
            'bucket_name': source.get_by_property_of_non_null(AliYunProperties.OSS_BUCKET_NAME),
        }


class AliYunOssConfig(AliYunOssClientConfig):
    """上传所需的完整配置快照"""

    protocol: str
    domain: str = ""
    style_rule: str = ""
    thumbnail_style_rule: str = ""

    @classmethod
    def from_options(cls, source: OptionSource) -> "AliYunOssConfig":
        return cls(
            protocol=source.get_by_property_of_non_null(AliYunProperties.OSS_PROTOCOL),
            domain=source.get_by_property_or_default(AliYunProperties.OSS_DOMAIN, ""),
            style_rule=source.get_by_property_or_default(AliYunProperties.OSS_STYLE_RULE, ""),
            thumbnail_style_rule=source.get_by_property_or_default(
                AliYunProperties.OSS_THUMBNAIL_STYLE_RULE, ""),
            **cls.read_client_fields(source)
        )

    @property
    def source_url(self) -> str:
        """存储桶默认访问地址"""
        return f"{self.protocol}{self.bucket_name}.{self.endpoint}"

    @property
    def base_url(self) -> str:
        """对外访问地址，优先使用自定义域名"""
        if self.domain.strip():
            return f"{self.protocol}{self.domain}"
        return self.source_url
