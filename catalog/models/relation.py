from catalog.extensions import db


class ProductRelation(db.Model):
    """Generic parent/child index shared by all composite product types."""

    __tablename__ = "catalog_product_relation"

    parent_id = db.Column(db.Integer, primary_key=True)
    child_id = db.Column(db.Integer, primary_key=True, index=True)

    def __repr__(self):
        return f"<ProductRelation {self.parent_id} -> {self.child_id}>"
