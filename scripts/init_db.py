"""locations テーブルを作成するスクリプト

Usage: python scripts/init_db.py
DATABASE_URL は .env または環境変数から読み込む。
"""
import asyncio
import logging
import sys
from pathlib import Path

from databases import Database

# --- プロジェクトルートを import パスに追加 ---
project_root = Path(__file__).parent.parent.resolve()
sys.path.append(str(project_root))

from city_explorer.config import settings  # noqa: E402
from city_explorer.errors import StoreUnavailable  # noqa: E402
from city_explorer.repositories.location_repository import LocationRepository  # noqa: E402

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def init_db(database_url: str) -> None:
    repository = LocationRepository(Database(database_url))
    await repository.connect()
    try:
        await repository.create_schema()
        logger.info("locations table is ready")
    finally:
        await repository.disconnect()


def main() -> int:
    try:
        asyncio.run(init_db(settings.DATABASE_URL))
    except StoreUnavailable as e:
        logger.error(f"Schema creation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
