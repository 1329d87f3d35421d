import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """アプリケーション設定"""
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./city_explorer.db")

    # Provider credentials
    GEOCODE_API_KEY: str = os.getenv("GEOCODE_API_KEY", "")
    WEATHER_API_KEY: str = os.getenv("WEATHER_API_KEY", "")
    YELP_API_KEY: str = os.getenv("YELP_API_KEY", "")
    MOVIE_API_KEY: str = os.getenv("MOVIE_API_KEY", "")
    TRAIL_API_KEY: str = os.getenv("TRAIL_API_KEY", "")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    UPSTREAM_TIMEOUT_SECONDS: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    # 開発・テスト用: 起動時に locations テーブルを作成する
    CREATE_SCHEMA_ON_STARTUP: bool = os.getenv("CREATE_SCHEMA_ON_STARTUP", "false").lower() == "true"

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def missing_api_keys(self) -> list[str]:
        names = ["GEOCODE_API_KEY", "WEATHER_API_KEY", "YELP_API_KEY", "MOVIE_API_KEY", "TRAIL_API_KEY"]
        return [name for name in names if not getattr(self, name)]

settings = Settings()
