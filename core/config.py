"""
配置文件 - 项目配置管理

配置在进程启动时从 .env 与进程环境变量加载一次，之后只读（frozen）。
"""
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


TEST_ENVIRONMENT = "test"


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="Pets API")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)

    # 运行模式：等于 "test" 时不监听端口，由测试直接驱动 app
    NODE_ENV: Optional[str] = Field(default=None)

    # 监听配置；PORT 缺省时交由 uvicorn 决定
    HOST: str = Field(default="0.0.0.0")
    PORT: Optional[int] = Field(default=None, ge=0, le=65535)

    # CORS配置（默认放行所有来源）
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(default=["*"])

    # 日志配置
    LOG_LEVEL: Optional[str] = Field(default=None, description="覆盖根日志级别，缺省按 DEBUG 推断")

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def is_test(self) -> bool:
        return self.NODE_ENV == TEST_ENVIRONMENT

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """允许 JSON 字符串或逗号分隔字符串两种格式。"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    arr = json.loads(s)
                    if isinstance(arr, list):
                        return arr
                except ValueError:
                    pass
            if "," in s:
                return [item.strip() for item in s.split(",") if item.strip()]
            return [s]
        return v


settings = Settings()
