from app.extensions import db
from app.models.types import UTCDateTime


class City(db.Model):
    __tablename__ = "cities"
    __table_args__ = {"sqlite_autoincrement": True}

    PATCHABLE_FIELDS = ("name", "country_id")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    country_id = db.Column(
        db.Integer, db.ForeignKey("countries.id"), nullable=True, index=True
    )
    created_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )

    # Relationships
    country = db.relationship("Country")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "country_id": self.country_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<City id={self.id} name='{self.name}' country_id={self.country_id}>"
