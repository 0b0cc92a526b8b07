from app.extensions import db
from app.models.types import UTCDateTime


class Department(db.Model):
    __tablename__ = "departments"
    __table_args__ = {"sqlite_autoincrement": True}

    PATCHABLE_FIELDS = ("name", "acronym", "church_id")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    acronym = db.Column(db.String(20), nullable=True)
    church_id = db.Column(
        db.Integer, db.ForeignKey("churches.id"), nullable=True, index=True
    )
    created_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )

    # Relationships
    church = db.relationship("Church")
    # Poles are removed explicitly by the store when a department goes away
    pole = db.relationship("Pole", uselist=False, viewonly=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "acronym": self.acronym,
            "church_id": self.church_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Department id={self.id} acronym='{self.acronym}' church_id={self.church_id}>"
