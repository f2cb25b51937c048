import os
import logging
from datetime import datetime, timezone
from pathlib import Path
from dotenv import load_dotenv
from extensions import db

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URI = "sqlite:///restaurant.db"

def safe_getenv(key, default=None):
    if os.path.exists(".env"): load_dotenv()
    return os.getenv(key, default)

def _load_db_url_from_file():
    """Read the DB URL from data/db_link if present."""
    link_file = Path(__file__).resolve().parent / "data" / "db_link"
    if link_file.exists():
        return link_file.read_text(encoding="utf-8").strip() or None
    return None

def load_db_url():
    return (
        safe_getenv('SQLALCHEMY_DATABASE_URI')
        or safe_getenv('DATABASE_URL')
        or _load_db_url_from_file()
        or DEFAULT_DATABASE_URI
    )

def utcnow():
    # naive UTC, the DateTime columns do not keep tzinfo on every backend
    return datetime.now(timezone.utc).replace(tzinfo=None)

def save_log_to_db(content):
    from models import Log

    try:
        log = Log(content=content[:500])
        db.session.add(log)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Failed to write audit log: %s", content)

def save_log(content):
    logger.info(content)
    save_log_to_db(content)
