from datetime import timezone

from sqlalchemy.types import TIMESTAMP, TypeDecorator


class UTCDateTime(TypeDecorator):
    """Timestamp that always comes back timezone-aware in UTC.

    SQLite drops the offset on storage, so naive values read back are
    taken to be UTC.
    """

    impl = TIMESTAMP(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
