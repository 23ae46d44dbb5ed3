"""
Engine names, driver names and environment variable names
"""

# Legacy engine names that select the file-based branch
ENGINE_SQLITE = 'sqlite'
ENGINE_SQLITE3 = 'sqlite3'
SQLITE_ENGINES = (ENGINE_SQLITE, ENGINE_SQLITE3)

# Descriptor driver names
DRIVER_SQLITE = 'sqlite'
DRIVER_POSTGRES = 'postgres'

# SQLAlchemy driver names used when rendering URLs
SQLALCHEMY_SQLITE_ASYNC = 'sqlite+aiosqlite'
SQLALCHEMY_SQLITE_SYNC = 'sqlite'
SQLALCHEMY_POSTGRES_ASYNC = 'postgresql+asyncpg'
SQLALCHEMY_POSTGRES_SYNC = 'postgresql+psycopg2'

# Config file locations
ENV_LEGACY_CONFIG_PATH = 'LEGACY_CONFIG_PATH'
ENV_MODERN_CONFIG_PATH = 'MODERN_CONFIG_PATH'

# Top-level key holding the database block in both config documents
DATABASE_SECTION = 'database'
