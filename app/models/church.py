from app.extensions import db
from app.models.types import UTCDateTime


class Church(db.Model):
    __tablename__ = "churches"
    __table_args__ = {"sqlite_autoincrement": True}

    PATCHABLE_FIELDS = ("name", "address", "city_id", "latitude", "longitude")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    city_id = db.Column(db.Integer, db.ForeignKey("cities.id"), nullable=True, index=True)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    created_at = db.Column(UTCDateTime(), nullable=False, server_default=db.func.now())
    updated_at = db.Column(UTCDateTime(), nullable=False, server_default=db.func.now())

    # Relationships
    city = db.relationship("City")

    @property
    def is_located(self):
        return self.latitude is not None and self.longitude is not None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "city_id": self.city_id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Church id={self.id} name='{self.name}' city_id={self.city_id}>"
