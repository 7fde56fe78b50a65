import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database.session import initialize_db, dispose_db

async def create_tables():
    """
    Create the database tables for the configured DATABASE_URL.
    """
    await initialize_db()
    await dispose_db()

import asyncio
asyncio.run(create_tables())
