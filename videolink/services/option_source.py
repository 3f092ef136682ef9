from videolink.extensions import db
from videolink.models.option import AttributeOption, Option

PLACEHOLDER = Option("", " ")


def get_attribute_options(attribute_code):
    """Ordered options of an attribute, led by the empty "no selection" entry."""
    rows = (
        AttributeOption.query.filter_by(attribute_code=attribute_code)
        .order_by(AttributeOption.sort_order, AttributeOption.id)
        .all()
    )
    return [PLACEHOLDER] + [row.as_option() for row in rows]


def add_option(attribute_code, label, sort_order=None):
    """Create an attribute option, appended after the existing ones."""
    existing = AttributeOption.query.filter_by(
        attribute_code=attribute_code, label=label
    ).first()
    if existing:
        return existing

    if sort_order is None:
        sort_order = (
            db.session.query(db.func.coalesce(db.func.max(AttributeOption.sort_order), -1))
            .filter(AttributeOption.attribute_code == attribute_code)
            .scalar()
            + 1
        )
    option = AttributeOption(
        attribute_code=attribute_code, label=label, sort_order=sort_order
    )
    db.session.add(option)
    db.session.commit()
    return option
