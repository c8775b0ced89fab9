import os

from dotenv import load_dotenv

# カレントディレクトリの .env を環境変数に読み込む（既存の環境変数は上書きしない）
load_dotenv()


class Settings:
    """アプリケーション設定"""

    # サーバー設定
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))

    # リクエストボディの上限（バイト）、デフォルト50MB
    MAX_BODY_SIZE: int = int(os.getenv("MAX_BODY_SIZE", str(50 * 1024 * 1024)))

    # CORS設定（カンマ区切り）
    CORS_ORIGINS: list = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # ログ設定
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # サービス情報
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "MediFlow Backend")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")


# グローバル設定インスタンス
settings = Settings()
