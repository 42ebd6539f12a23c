import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/orders.db")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    TZ_OFFSET_HOURS: int = int(os.getenv("TZ_OFFSET_HOURS", "8"))
    UI_ENABLED_DEFAULT: bool = os.getenv("UI_ENABLED_DEFAULT", "false").lower() in ("1", "true", "yes")
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

settings = Settings()
