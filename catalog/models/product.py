from catalog.extensions import db


class Product(db.Model):
    __tablename__ = "catalog_product_entity"

    entity_id = db.Column(db.Integer, primary_key=True)
    # Internal row key; equals entity_id unless product rows are staged
    row_id = db.Column(db.Integer, unique=True, nullable=False, index=True)
    type_id = db.Column(db.String(32), nullable=False, default="simple", index=True)
    sku = db.Column(db.String(64), unique=True, nullable=False, index=True)
    has_options = db.Column(db.SmallInteger, nullable=False, default=0)
    required_options = db.Column(db.SmallInteger, nullable=False, default=0)

    @property
    def is_configurable(self):
        return self.type_id == "configurable"

    def get_data(self, field):
        """Read a column value by name (used for the configurable link field)."""
        return getattr(self, field)

    def __repr__(self):
        return f"<Product {self.sku} [{self.type_id}]>"
