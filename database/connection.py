# backend/database/connection.py
import logging
from urllib.parse import quote_plus
from pymongo import MongoClient
from pymongo.database import Database

LOG = logging.getLogger("database.connection")

# ============================================================
# 🔧 URI BUILDER
# ============================================================
def build_mongo_uri(settings) -> str:
    """MONGO_URI wins; otherwise the URI is assembled from its parts."""
    if settings.MONGO_URI:
        return settings.MONGO_URI
    host = f"{settings.MONGO_HOST}:{settings.MONGO_PORT}"
    if settings.MONGO_USER:
        user = quote_plus(settings.MONGO_USER)
        password = quote_plus(settings.MONGO_PASSWORD or "")
        return f"mongodb://{user}:{password}@{host}"
    return f"mongodb://{host}"

# ============================================================
# 🔌 CLIENT
# ============================================================
def get_client(settings) -> MongoClient:
    try:
        return MongoClient(build_mongo_uri(settings))
    except Exception as e:
        LOG.error(f"❌ Error creating MongoDB client: {e}")
        raise

# ============================================================
# 👥 APPLICATION DATABASE
# ============================================================
def get_database(settings, client: MongoClient = None) -> Database:
    client = client or get_client(settings)
    db = client[settings.MONGO_DB]
    LOG.info(f"✅ Using MongoDB database: {settings.MONGO_DB}")
    return db
