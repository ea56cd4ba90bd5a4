"""
系统配置管理
统一管理附件存储相关的配置参数
"""

import os
from typing import List, Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AliYunOssSettings(BaseSettings):
    """阿里云OSS配置

    字段名与附件选项键保持一致，可通过环境变量 (如 OSS_ALIYUN_ENDPOINT) 提供。
    """
    oss_aliyun_domain_protocol: Optional[str] = "https://"
    oss_aliyun_domain: Optional[str] = None
    oss_aliyun_endpoint: Optional[str] = None
    oss_aliyun_access_key: Optional[str] = None
    oss_aliyun_access_secret: Optional[str] = None
    oss_aliyun_bucket_name: Optional[str] = None
    oss_aliyun_style_rule: Optional[str] = None
    oss_aliyun_thumbnail_style_rule: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AttachmentConfig(BaseSettings):
    """附件配置"""
    type: str = "ALIYUN"
    max_file_size_mb: int = 100

    @field_validator('type')
    @classmethod
    def normalize_type(cls, v):
        return v.strip().upper()

    model_config = SettingsConfigDict(env_prefix="ATTACHMENT_")


class MonitoringConfig(BaseSettings):
    """监控配置"""
    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v):
        return v.strip().upper()

    model_config = SettingsConfigDict(env_prefix="MONITORING_")


class AppConfig(BaseSettings):
    """应用主配置"""
    debug: bool = False
    testing: bool = False
    environment: str = "production"
    app_name: str = "Attachment Storage"
    app_version: str = "1.0.0"

    # 子配置
    aliyun_oss: AliYunOssSettings = Field(default_factory=AliYunOssSettings)
    attachment: AttachmentConfig = Field(default_factory=AttachmentConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> AppConfig:
    """获取应用配置单例"""
    return AppConfig()


# 配置验证函数
def validate_config(config: AppConfig) -> List[str]:
    """验证配置的有效性"""
    errors = []

    if config.attachment.type == "ALIYUN":
        oss = config.aliyun_oss
        required = {
            "oss_aliyun_endpoint": oss.oss_aliyun_endpoint,
            "oss_aliyun_access_key": oss.oss_aliyun_access_key,
            "oss_aliyun_access_secret": oss.oss_aliyun_access_secret,
            "oss_aliyun_bucket_name": oss.oss_aliyun_bucket_name,
            "oss_aliyun_domain_protocol": oss.oss_aliyun_domain_protocol,
        }
        for key, value in required.items():
            if not value or not value.strip():
                errors.append(f"阿里云OSS必须设置 {key}")

    if config.attachment.max_file_size_mb <= 0:
        errors.append("max_file_size_mb 必须大于 0")

    if config.monitoring.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"不支持的日志级别: {config.monitoring.log_level}")

    return errors


# 环境特定配置
class DevelopmentConfig(AppConfig):
    """开发环境配置"""
    debug: bool = True
    environment: str = "development"

    model_config = SettingsConfigDict(env_file=".env.dev")


class TestingConfig(AppConfig):
    """测试环境配置"""
    testing: bool = True
    environment: str = "testing"

    model_config = SettingsConfigDict(env_file=".env.test")


class ProductionConfig(AppConfig):
    """生产环境配置"""
    debug: bool = False
    environment: str = "production"

    model_config = SettingsConfigDict(env_file=".env.prod")


# 配置工厂函数
def get_config_by_env(env: str = None) -> AppConfig:
    """根据环境获取配置"""
    env = env or os.getenv("ENVIRONMENT", "production")

    config_map = {
        "development": DevelopmentConfig,
        "testing": TestingConfig,
        "production": ProductionConfig
    }

    config_class = config_map.get(env, ProductionConfig)
    return config_class()
