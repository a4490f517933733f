#!/usr/bin/env python3
"""Seed a sample configurable product for local development."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog import create_app
from catalog.extensions import db
from catalog.models import (
    Attribute,
    AttributeOption,
    AttributeOptionValue,
    Product,
    ProductIntValue,
    SuperAttribute,
    SuperAttributeLabel,
)
from catalog.services.configurable_link import get_configurable_link_repository

app = create_app()

ATTRIBUTES = {
    "color": ("Color", ["Red", "Navy Blue", "Emerald Green"]),
    "size": ("Size", ["S", "M", "L"]),
}

PARENT_SKU = "TEE-BASIC"

CHILDREN = [
    ("TEE-BASIC-RED-S", "Red", "S"),
    ("TEE-BASIC-RED-M", "Red", "M"),
    ("TEE-BASIC-NAVY-M", "Navy Blue", "M"),
    ("TEE-BASIC-NAVY-L", "Navy Blue", "L"),
    ("TEE-BASIC-GREEN-L", "Emerald Green", "L"),
]


def _create_attributes():
    """Create select attributes; returns {code: (attribute, {label: option_id})}."""
    created = {}
    for code, (label, values) in ATTRIBUTES.items():
        attribute = Attribute(attribute_code=code, backend_type="int", frontend_label=label)
        db.session.add(attribute)
        db.session.flush()

        option_ids = {}
        for i, value in enumerate(values):
            option = AttributeOption(attribute_id=attribute.attribute_id, sort_order=i)
            db.session.add(option)
            db.session.flush()
            db.session.add(
                AttributeOptionValue(option_id=option.option_id, store_id=0, value=value)
            )
            option_ids[value] = option.option_id
        created[code] = (attribute, option_ids)
    return created


def _create_product(entity_id, sku, type_id="simple"):
    product = Product(entity_id=entity_id, row_id=entity_id, sku=sku, type_id=type_id)
    db.session.add(product)
    return product


def seed():
    with app.app_context():
        if db.session.execute(db.select(Product).limit(1)).first():
            print("Products already exist — skipping seed.")
            return

        attributes = _create_attributes()
        parent = _create_product(1001, PARENT_SKU, type_id="configurable")

        child_ids = []
        for i, (sku, color, size) in enumerate(CHILDREN):
            child = _create_product(2001 + i, sku)
            for code, value in (("color", color), ("size", size)):
                attribute, option_ids = attributes[code]
                db.session.add(
                    ProductIntValue(
                        attribute_id=attribute.attribute_id,
                        store_id=0,
                        entity_id=child.entity_id,
                        row_id=child.row_id,
                        value=option_ids[value],
                    )
                )
            child_ids.append(child.entity_id)
            print(f"  Created {sku}")
        db.session.flush()

        repo = get_configurable_link_repository()
        parent_key = parent.get_data(repo.resolve_link_field())
        for position, code in enumerate(("color", "size")):
            attribute, _ = attributes[code]
            super_attribute = SuperAttribute(
                product_id=parent_key, attribute_id=attribute.attribute_id, position=position
            )
            super_attribute.labels.append(
                SuperAttributeLabel(store_id=0, value=attribute.frontend_label)
            )
            db.session.add(super_attribute)

        repo.save_links(parent, child_ids)
        db.session.commit()
        print(f"\nSeeded {PARENT_SKU} with {len(child_ids)} children.")


if __name__ == "__main__":
    seed()
