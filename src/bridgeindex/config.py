from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 5433
    db_user: str = "dev"
    db_password: str = "dev"
    db_name: str = "tokendb"
    http_timeout: float = 30.0  # seconds, per upstream request
    token_batch_size: int = 500
    admin_secret: str = ""
    cron_secret: str = ""
    debug: bool = False
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    class Config:
        env_file = ".env"


settings = Settings()
