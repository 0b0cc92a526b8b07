from app.extensions import db
from app.models.types import UTCDateTime


class Country(db.Model):
    __tablename__ = "countries"
    __table_args__ = {"sqlite_autoincrement": True}

    PATCHABLE_FIELDS = ("name", "continent_id")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    continent_id = db.Column(
        db.Integer, db.ForeignKey("continents.id"), nullable=True, index=True
    )
    created_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )

    # Relationships
    continent = db.relationship("Continent")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "continent_id": self.continent_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Country id={self.id} name='{self.name}' continent_id={self.continent_id}>"
