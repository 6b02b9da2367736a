# jewellery_store/utils/time.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current time; used for every created_at / updated_at column."""
    return datetime.now(timezone.utc)
