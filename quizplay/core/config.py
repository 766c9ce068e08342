from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "QuizPlay API"

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./quizplay.db"
    SQL_ECHO: bool = False

    # logging
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    # play sessions not touched for this long are dropped
    PLAY_SESSION_TTL_SECONDS: int = 3600

    class Config:
        env_file = ".env"


settings = Settings()
