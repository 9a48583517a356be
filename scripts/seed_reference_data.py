"""Seed default currencies and countries."""

import asyncio
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from houseledger.core.database import AsyncSessionLocal, init_db  # noqa: E402
from houseledger.core.logging_config import setup_logging  # noqa: E402
from houseledger.domain.ancillary.seed import seed_reference_data  # noqa: E402


async def main() -> None:
    await init_db()
    async with AsyncSessionLocal() as session:
        inserted = await seed_reference_data(session)
    print(f"Inserted {inserted} reference rows")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
