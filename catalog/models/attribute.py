from catalog.extensions import db

DEFAULT_STORE_ID = 0


class Attribute(db.Model):
    __tablename__ = "eav_attribute"

    attribute_id = db.Column(db.Integer, primary_key=True)
    attribute_code = db.Column(db.String(255), unique=True, nullable=False)
    backend_type = db.Column(db.String(8), nullable=False, default="int")
    # Explicit value table; defaults to catalog_product_entity_<backend_type>
    backend_table = db.Column(db.String(255))
    frontend_label = db.Column(db.String(255))

    options = db.relationship(
        "AttributeOption",
        backref="attribute",
        lazy="select",
        cascade="all, delete-orphan",
        order_by="AttributeOption.sort_order",
    )

    def get_backend_table(self):
        if self.backend_table:
            return self.backend_table
        return f"catalog_product_entity_{self.backend_type}"

    def __repr__(self):
        return f"<Attribute {self.attribute_code}>"


class AttributeOption(db.Model):
    __tablename__ = "eav_attribute_option"

    option_id = db.Column(db.Integer, primary_key=True)
    attribute_id = db.Column(
        db.Integer,
        db.ForeignKey("eav_attribute.attribute_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sort_order = db.Column(db.Integer, default=0)

    values = db.relationship(
        "AttributeOptionValue",
        backref="option",
        lazy="select",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<AttributeOption {self.option_id}>"


class AttributeOptionValue(db.Model):
    """Store-scoped label of an attribute option."""

    __tablename__ = "eav_attribute_option_value"

    value_id = db.Column(db.Integer, primary_key=True)
    option_id = db.Column(
        db.Integer,
        db.ForeignKey("eav_attribute_option.option_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    store_id = db.Column(db.Integer, nullable=False, default=DEFAULT_STORE_ID)
    value = db.Column(db.String(255))

    def __repr__(self):
        return f"<AttributeOptionValue {self.value!r} store={self.store_id}>"
