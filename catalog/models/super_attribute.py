from catalog.extensions import db


class SuperAttribute(db.Model):
    """Attribute used as a configuration axis of a configurable product."""

    __tablename__ = "catalog_product_super_attribute"

    product_super_attribute_id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, nullable=False, index=True)
    attribute_id = db.Column(
        db.Integer,
        db.ForeignKey("eav_attribute.attribute_id", ondelete="CASCADE"),
        nullable=False,
    )
    position = db.Column(db.Integer, nullable=False, default=0)

    labels = db.relationship(
        "SuperAttributeLabel",
        backref="super_attribute",
        lazy="select",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.UniqueConstraint("product_id", "attribute_id", name="uq_super_attribute"),
    )

    def __repr__(self):
        return f"<SuperAttribute {self.attribute_id} on {self.product_id}>"


class SuperAttributeLabel(db.Model):
    __tablename__ = "catalog_product_super_attribute_label"

    value_id = db.Column(db.Integer, primary_key=True)
    product_super_attribute_id = db.Column(
        db.Integer,
        db.ForeignKey(
            "catalog_product_super_attribute.product_super_attribute_id",
            ondelete="CASCADE",
        ),
        nullable=False,
    )
    store_id = db.Column(db.Integer, nullable=False, default=0)
    use_default = db.Column(db.SmallInteger, default=0)
    value = db.Column(db.String(255))

    __table_args__ = (
        db.UniqueConstraint(
            "product_super_attribute_id", "store_id", name="uq_super_attribute_label"
        ),
    )

    def __repr__(self):
        return f"<SuperAttributeLabel {self.value!r} store={self.store_id}>"
