import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "AlaObra"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "super-secret-key-change-it")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Database
    MYSQL_USER: str = os.getenv("MYSQL_USER", "root")
    MYSQL_PASSWORD: str = os.getenv("MYSQL_PASSWORD", "")
    MYSQL_SERVER: str = os.getenv("MYSQL_SERVER", "localhost")
    MYSQL_PORT: str = os.getenv("MYSQL_PORT", "3306")
    MYSQL_DB: str = os.getenv("MYSQL_DB", "alaobra_db")
    USE_SQLITE: bool = True
    SQLITE_PATH: str = "./alaobra.db"

    # Photo storage
    UPLOAD_DIR: str = "app/static/uploads"
    UPLOAD_URL_PREFIX: str = "/static/uploads"
    MAX_UPLOAD_MB: int = 10

    # Behaviour
    DEFAULT_LOCALE: str = "pt"
    DEFAULT_PROFILE_ROLE: str = "worker"
    DASHBOARD_POLL_SECONDS: int = 30
    WORKING_TIME_REFRESH_SECONDS: int = 60
    CHANGE_FEED_SIZE: int = 500
    LOG_LEVEL: str = "INFO"

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.USE_SQLITE:
            return f"sqlite:///{self.SQLITE_PATH}"
        return f"mysql+mysqlconnector://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_SERVER}:{self.MYSQL_PORT}/{self.MYSQL_DB}"

settings = Settings()
