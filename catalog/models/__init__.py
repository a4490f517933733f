from catalog.models.product import Product
from catalog.models.attribute import Attribute, AttributeOption, AttributeOptionValue
from catalog.models.entity_value import ProductIntValue, ProductVarcharValue
from catalog.models.super_attribute import SuperAttribute, SuperAttributeLabel
from catalog.models.super_link import SuperLink
from catalog.models.relation import ProductRelation

__all__ = [
    "Product",
    "Attribute",
    "AttributeOption",
    "AttributeOptionValue",
    "ProductIntValue",
    "ProductVarcharValue",
    "SuperAttribute",
    "SuperAttributeLabel",
    "SuperLink",
    "ProductRelation",
]
