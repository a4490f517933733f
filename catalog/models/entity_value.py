from catalog.extensions import db


class _EntityValueMixin:
    value_id = db.Column(db.Integer, primary_key=True)
    attribute_id = db.Column(db.Integer, nullable=False, index=True)
    store_id = db.Column(db.Integer, nullable=False, default=0)
    entity_id = db.Column(db.Integer, nullable=False, index=True)
    row_id = db.Column(db.Integer, nullable=False, index=True)

    def __repr__(self):
        return (
            f"<{type(self).__name__} attr={self.attribute_id} "
            f"entity={self.entity_id}: {self.value!r}>"
        )


class ProductIntValue(_EntityValueMixin, db.Model):
    __tablename__ = "catalog_product_entity_int"

    value = db.Column(db.Integer)

    __table_args__ = (
        db.UniqueConstraint(
            "attribute_id", "store_id", "entity_id", name="uq_product_int_value"
        ),
    )


class ProductVarcharValue(_EntityValueMixin, db.Model):
    __tablename__ = "catalog_product_entity_varchar"

    value = db.Column(db.String(255))

    __table_args__ = (
        db.UniqueConstraint(
            "attribute_id", "store_id", "entity_id", name="uq_product_varchar_value"
        ),
    )
