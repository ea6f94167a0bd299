from __future__ import annotations

import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from personacart.db.init_db import seed_products
from personacart.db.seed import SAMPLE_PRODUCTS
from scripts.setup_database import main, setup_database


def count_products(url: str) -> int:
    async def _count() -> int:
        engine = create_async_engine(url)
        try:
            async with engine.connect() as conn:
                result = await conn.execute(text("SELECT COUNT(*) FROM products"))
                return result.scalar()
        finally:
            await engine.dispose()

    return asyncio.run(_count())


def test_setup_database_creates_and_seeds(tmp_path):
    url = f"sqlite:///{tmp_path / 'setup.db'}"
    assert asyncio.run(setup_database(url)) is True
    assert count_products(f"sqlite+aiosqlite:///{tmp_path / 'setup.db'}") == len(SAMPLE_PRODUCTS)

    # Chạy lại không seed trùng
    assert asyncio.run(setup_database(url)) is True
    assert count_products(f"sqlite+aiosqlite:///{tmp_path / 'setup.db'}") == len(SAMPLE_PRODUCTS)


def test_setup_database_cli_without_seed(tmp_path):
    url = f"sqlite:///{tmp_path / 'empty.db'}"
    assert main([url, "--reset", "--no-seed"]) == 0
    assert count_products(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}") == 0


def test_seed_is_skipped_when_catalog_exists(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seeded.db'}"
    assert asyncio.run(setup_database(url)) is True

    async def _seed_again() -> int:
        engine = create_async_engine(url)
        try:
            return await seed_products(engine)
        finally:
            await engine.dispose()

    assert asyncio.run(_seed_again()) == 0
