from datetime import datetime, timezone
from sqlalchemy.orm import validates
from videolink.extensions import db


class AuditLog(db.Model):
    __tablename__ = "audit_log"

    id = db.Column(db.Integer, primary_key=True)
    admin = db.Column(db.String(100), nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False)
    product_id = db.Column(
        db.Integer,
        db.ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    payload = db.Column(db.JSON)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    ACTIONS = {
        "SET_VIDEO_LINKS",
        "SET_VIDEO_LINK",
        "CLEAR_VIDEO_LINK",
    }

    @validates("action")
    def validate_action(self, key, value):
        if value not in self.ACTIONS:
            raise ValueError(f"Unknown audit action: {value}")
        return value

    def __repr__(self):
        return f"<AuditLog {self.action} by {self.admin}>"
