"""应用配置"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"

# 仅供本地开发使用的默认值，生产环境必须通过环境变量覆盖
DEV_JWT_SECRET_KEY = "dev-jwt-secret-change-me"
DEV_ADMIN_PASSWORD = "dev-admin-change-me"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production"] = "development"

    # 由 docker-compose.yml 的 environment.DATABASE_URL 注入
    database_url: str = Field(...)

    # JWT 配置
    jwt_secret_key: str = DEV_JWT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 24 * 60

    # 密码哈希
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # 初始管理员（仅在 admins 表为空时创建）
    bootstrap_admin_usernames: list[str] = ["furqan", "danish", "abdurrahman"]
    admin_password: str = DEV_ADMIN_PASSWORD

    # 前端
    cors_origins: list[str] = ["*"]
    static_dir: Path = Path("client/build")

    # 日志配置
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def seed_admins(self) -> list[tuple[str, str]]:
        """初始管理员列表 [(username, password)]"""
        if not self.admin_password:
            return []
        return [
            (username, self.admin_password)
            for username in self.bootstrap_admin_usernames
            if username
        ]

    def insecure_defaults(self) -> list[str]:
        """返回仍在使用开发默认值的敏感配置项名称"""
        names = []
        if self.jwt_secret_key == DEV_JWT_SECRET_KEY:
            names.append("JWT_SECRET_KEY")
        if self.admin_password == DEV_ADMIN_PASSWORD:
            names.append("ADMIN_PASSWORD")
        return names


settings = Settings()
