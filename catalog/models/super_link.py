from catalog.extensions import db


class SuperLink(db.Model):
    """Child simple product linked to a configurable parent."""

    __tablename__ = "catalog_product_super_link"

    link_id = db.Column(db.Integer, primary_key=True)
    # Child product entity_id
    product_id = db.Column(db.Integer, nullable=False, index=True)
    # Parent product link-field value (entity_id or row_id)
    parent_id = db.Column(db.Integer, nullable=False, index=True)

    __table_args__ = (
        db.UniqueConstraint("product_id", "parent_id", name="uq_super_link_product_parent"),
    )

    def __repr__(self):
        return f"<SuperLink {self.parent_id} -> {self.product_id}>"
