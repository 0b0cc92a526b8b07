from app.extensions import db
from app.models.types import UTCDateTime


class Continent(db.Model):
    __tablename__ = "continents"
    __table_args__ = {"sqlite_autoincrement": True}

    PATCHABLE_FIELDS = ("name",)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    created_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Continent id={self.id} name='{self.name}'>"
