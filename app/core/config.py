from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./customers.db"
    AUTO_CREATE_TABLES: bool = True

    # Application
    APP_NAME: str = "Customer API"
    LOG_LEVEL: str = "DEBUG"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
