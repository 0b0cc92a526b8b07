from app.extensions import db
from app.models.types import UTCDateTime


class Pole(db.Model):
    __tablename__ = "poles"

    PATCHABLE_FIELDS = ("name", "department_id")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    department_id = db.Column(
        db.Integer, db.ForeignKey("departments.id"), nullable=True
    )
    created_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        UTCDateTime(), nullable=False, server_default=db.func.now()
    )

    # Relationships
    department = db.relationship("Department", viewonly=True)

    # A department owns at most one pole
    __table_args__ = (
        db.UniqueConstraint("department_id", name="uq_pole_department"),
        {"sqlite_autoincrement": True},
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "department_id": self.department_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Pole id={self.id} name='{self.name}' department_id={self.department_id}>"
