from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'

class Settings(BaseSettings):
    PROJECT_NAME: str = "TikTok Downloader API"
    CORS_ORIGINS: list[str] = ["*"]

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Upstream extraction API
    UPSTREAM_URL: str = "https://api.ivoid.cfd/downloader/tiktok"
    UPSTREAM_TIMEOUT: float = 15.0
    USER_AGENT: str = DEFAULT_USER_AGENT

    class Config:
        case_sensitive = True
