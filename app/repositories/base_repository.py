from typing import Optional

from app.extensions import db


class BaseRepository:
    """Data access shared by every directory table.

    Subclasses only set ``model``. Writes are flushed so generated ids are
    available, committing is left to the caller.
    """

    model = None

    @classmethod
    def query(cls):
        return cls.model.query.order_by(cls.model.id.asc())

    @classmethod
    def get(cls, entity_id: int) -> Optional[db.Model]:
        return db.session.get(cls.model, entity_id)

    @classmethod
    def count(cls) -> int:
        return cls.model.query.count()

    @classmethod
    def exists_with(cls, field: str, value) -> bool:
        return (
            db.session.query(cls.model.id)
            .filter(getattr(cls.model, field) == value)
            .first()
            is not None
        )

    @classmethod
    def create(cls, attrs: dict):
        entity = cls.model(**attrs)
        db.session.add(entity)
        db.session.flush()
        return entity

    @staticmethod
    def update(entity, attrs: dict):
        for key, value in attrs.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        db.session.flush()
        return entity

    @staticmethod
    def delete(entity):
        db.session.delete(entity)
        db.session.flush()
