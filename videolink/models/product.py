from datetime import datetime, timezone
from sqlalchemy.orm import validates
from videolink.extensions import db


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    sku = db.Column(db.String(64), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    type_id = db.Column(db.String(20), nullable=False, default="simple")
    status = db.Column(
        db.String(20), nullable=False, default="ENABLED", index=True
    )
    # JSON text: {"<option id>": "<url>", ...}
    video_link = db.Column(db.Text, nullable=True)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    TYPES = {"simple", "configurable"}
    VALID_STATUSES = {"ENABLED", "DISABLED"}

    @validates("type_id")
    def validate_type_id(self, key, value):
        if value not in self.TYPES:
            raise ValueError(f"Unknown product type: {value}")
        return value

    @validates("status")
    def validate_status(self, key, value):
        if value not in self.VALID_STATUSES:
            raise ValueError(f"Unknown product status: {value}")
        return value

    @property
    def is_configurable(self):
        return self.type_id == "configurable"

    def __repr__(self):
        return f"<Product {self.sku}: {self.name}>"
