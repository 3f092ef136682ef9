from collections import namedtuple
from videolink.extensions import db

# Value handed to the form extender; the first entry of an option list is
# the "no selection" placeholder.
Option = namedtuple("Option", ["id", "label"])


class AttributeOption(db.Model):
    __tablename__ = "attribute_options"

    id = db.Column(db.Integer, primary_key=True)
    attribute_code = db.Column(db.String(50), nullable=False, index=True)  # "color"
    label = db.Column(db.String(100), nullable=False)  # "Red"
    sort_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("attribute_code", "label", name="uq_attribute_option"),
    )

    def as_option(self):
        return Option(self.id, self.label)

    def __repr__(self):
        return f"<AttributeOption {self.attribute_code}: {self.label}>"
