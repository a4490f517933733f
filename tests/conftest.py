import pytest
from catalog import create_app
from catalog.extensions import db as _db
from catalog.models import (
    Attribute,
    AttributeOption,
    AttributeOptionValue,
    Product,
    ProductIntValue,
    SuperAttribute,
    SuperAttributeLabel,
)


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    """Per-test database session with rollback."""
    with app.app_context():
        _db.session.begin_nested()
        yield _db
        _db.session.rollback()
        # CLI commands commit; wipe whatever made it past the savepoint
        for table in reversed(_db.metadata.sorted_tables):
            _db.session.execute(table.delete())
        _db.session.commit()


@pytest.fixture
def make_product(db):
    def _make(entity_id, sku=None, type_id="simple", row_id=None, required_options=0):
        product = Product(
            entity_id=entity_id,
            row_id=row_id if row_id is not None else entity_id,
            sku=sku or f"SKU-{entity_id}",
            type_id=type_id,
            required_options=required_options,
        )
        db.session.add(product)
        db.session.flush()
        return product

    return _make


@pytest.fixture
def make_select_attribute(db):
    """Select attribute with store-0 option labels; returns (attribute, {label: option_id})."""

    def _make(code, labels, frontend_label=None):
        attribute = Attribute(
            attribute_code=code, backend_type="int", frontend_label=frontend_label or code
        )
        db.session.add(attribute)
        db.session.flush()

        option_ids = {}
        for i, label in enumerate(labels):
            option = AttributeOption(attribute_id=attribute.attribute_id, sort_order=i)
            db.session.add(option)
            db.session.flush()
            db.session.add(
                AttributeOptionValue(option_id=option.option_id, store_id=0, value=label)
            )
            option_ids[label] = option.option_id
        db.session.flush()
        return attribute, option_ids

    return _make


@pytest.fixture
def set_value(db):
    def _set(attribute, product, value, model=ProductIntValue, store_id=0):
        row = model(
            attribute_id=attribute.attribute_id,
            store_id=store_id,
            entity_id=product.entity_id,
            row_id=product.row_id,
            value=value,
        )
        db.session.add(row)
        db.session.flush()
        return row

    return _set


@pytest.fixture
def add_super_attribute(db):
    def _add(parent_key, attribute, position=0, label=None):
        super_attribute = SuperAttribute(
            product_id=parent_key, attribute_id=attribute.attribute_id, position=position
        )
        if label is not None:
            super_attribute.labels.append(SuperAttributeLabel(store_id=0, value=label))
        db.session.add(super_attribute)
        db.session.flush()
        return super_attribute

    return _add
