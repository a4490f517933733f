"""Configurable product links: which simple products belong to which parent.

Every statement runs in the caller's session; nothing here commits or
rolls back.
"""
import logging

from flask import current_app
from sqlalchemy import and_, cast, delete, select

from catalog.errors import ResolutionError
from catalog.extensions import db
from catalog.models.attribute import Attribute, AttributeOptionValue, DEFAULT_STORE_ID
from catalog.models.product import Product
from catalog.models.super_attribute import SuperAttribute, SuperAttributeLabel
from catalog.models.super_link import SuperLink
from catalog.services.db_utils import insert_on_duplicate
from catalog.services.entity_metadata import PRODUCT_ENTITY_TYPE, pool_from_config
from catalog.services.product_relation import RelationProcessor

logger = logging.getLogger(__name__)

# Children of every parent are reported under this single group.
CHILDREN_GROUP = 0


def _as_id_list(ids):
    if isinstance(ids, (int, str)):
        return [int(ids)]
    return [int(i) for i in ids]


def _unique(ids):
    return list(dict.fromkeys(ids))


class ConfigurableLinkRepository:
    main_table = SuperLink.__table__

    def __init__(self, session, relation_processor, link_resolver, metadata=None):
        self.session = session
        self.relation_processor = relation_processor
        self.link_resolver = link_resolver
        self.metadata = metadata if metadata is not None else db.metadata
        self._link_field = None

    def resolve_link_field(self):
        """Column joining product rows across tables, resolved once."""
        if self._link_field is None:
            self._link_field = self.link_resolver.get_link_field(PRODUCT_ENTITY_TYPE)
        return self._link_field

    def find_entity_id_by_option(self, option):
        """Entity id of the product whose link field equals ``option.product_id``.

        Returns 0 when no product matches.
        """
        e = Product.__table__.alias("e")
        stmt = (
            select(e.c.entity_id)
            .where(e.c[self.resolve_link_field()] == option.product_id)
            .limit(1)
        )
        entity_id = self.session.execute(stmt).scalar()
        return int(entity_id) if entity_id is not None else 0

    def save_links(self, parent_product, child_ids):
        """Make ``child_ids`` the exact set of children of ``parent_product``."""
        if not isinstance(parent_product, Product):
            logger.debug("save_links skipped: %r is not a product", parent_product)
            return self

        parent_key = parent_product.get_data(self.resolve_link_field())
        child_ids = _unique(_as_id_list(child_ids))

        rows = [{"product_id": cid, "parent_id": parent_key} for cid in child_ids]
        if rows:
            insert_on_duplicate(
                self.session, self.main_table, rows, ["product_id", "parent_id"]
            )

        prune = delete(self.main_table).where(self.main_table.c.parent_id == parent_key)
        if child_ids:
            prune = prune.where(self.main_table.c.product_id.not_in(child_ids))
        self.session.execute(prune)

        self.relation_processor.process_relations(parent_key, child_ids)

        logger.info("Saved %d child links for parent %s", len(child_ids), parent_key)
        return self

    def get_children_ids(self, parent_ids, required=True):
        """Children of the given parents, grouped under ``CHILDREN_GROUP``.

        Only children without required custom options are returned.
        ``required`` is accepted for interface compatibility and ignored.
        """
        link_field = self.resolve_link_field()
        l = self.main_table.alias("l")
        p = Product.__table__.alias("p")
        e = Product.__table__.alias("e")

        stmt = (
            select(l.c.product_id, l.c.parent_id)
            .select_from(l)
            .join(p, p.c[link_field] == l.c.parent_id)
            .join(e, and_(e.c.entity_id == l.c.product_id, e.c.required_options == 0))
            .where(p.c.entity_id.in_(_as_id_list(parent_ids)))
        )

        children = {CHILDREN_GROUP: {}}
        for row in self.session.execute(stmt):
            children[CHILDREN_GROUP][row.product_id] = row.product_id
        return children

    def get_parent_ids_by_child(self, child_ids):
        """Entity ids of the parents linked to any of ``child_ids``."""
        l = self.main_table.alias("l")
        e = Product.__table__.alias("e")

        stmt = (
            select(e.c.entity_id)
            .select_from(l)
            .join(e, e.c[self.resolve_link_field()] == l.c.parent_id)
            .where(l.c.product_id.in_(_as_id_list(child_ids)))
            .distinct()
        )
        return [int(entity_id) for entity_id in self.session.execute(stmt).scalars()]

    def get_configurable_options(self, product, attributes):
        """Option rows reachable through the children of ``product``.

        ``attributes`` are descriptors exposing ``attribute_id`` and
        ``get_backend_table()``. Returns ``{attribute_id: [row, ...]}`` where
        each row holds sku, product_id, attribute_code, option_title and
        super_attribute_label of one linked child.
        """
        link_field = self.resolve_link_field()
        product_key = product.get_data(link_field)

        options = {}
        for attribute in attributes:
            stmt = self._options_select(
                link_field,
                product_key,
                attribute.attribute_id,
                self._backend_table(attribute.get_backend_table()),
            )
            options[attribute.attribute_id] = [
                dict(row._mapping) for row in self.session.execute(stmt)
            ]
        return options

    def _options_select(self, link_field, product_key, attribute_id, value_table):
        super_attribute = SuperAttribute.__table__.alias("super_attribute")
        product_entity = Product.__table__.alias("product_entity")
        product_link = self.main_table.alias("product_link")
        attribute = Attribute.__table__.alias("attribute")
        entity = Product.__table__.alias("entity")
        entity_value = value_table.alias("entity_value")
        option_value = AttributeOptionValue.__table__.alias("option_value")
        attribute_label = SuperAttributeLabel.__table__.alias("attribute_label")

        return (
            select(
                entity.c.sku.label("sku"),
                entity.c.entity_id.label("product_id"),
                attribute.c.attribute_code.label("attribute_code"),
                option_value.c.value.label("option_title"),
                attribute_label.c.value.label("super_attribute_label"),
            )
            .select_from(super_attribute)
            .join(product_entity, product_entity.c[link_field] == super_attribute.c.product_id)
            .join(product_link, product_link.c.parent_id == super_attribute.c.product_id)
            .join(attribute, attribute.c.attribute_id == super_attribute.c.attribute_id)
            .join(entity, entity.c.entity_id == product_link.c.product_id)
            .join(
                entity_value,
                and_(
                    entity_value.c.attribute_id == super_attribute.c.attribute_id,
                    entity_value.c.store_id == DEFAULT_STORE_ID,
                    entity_value.c[link_field] == entity.c[link_field],
                ),
            )
            .outerjoin(
                option_value,
                and_(
                    # Option ids compared in the value column's type; a text
                    # value that names no option leaves the label NULL
                    cast(option_value.c.option_id, entity_value.c.value.type)
                    == entity_value.c.value,
                    option_value.c.store_id == DEFAULT_STORE_ID,
                ),
            )
            .outerjoin(
                attribute_label,
                and_(
                    attribute_label.c.product_super_attribute_id
                    == super_attribute.c.product_super_attribute_id,
                    attribute_label.c.store_id == DEFAULT_STORE_ID,
                ),
            )
            .where(
                super_attribute.c.product_id == product_key,
                super_attribute.c.attribute_id == attribute_id,
            )
        )

    def _backend_table(self, name):
        table = self.metadata.tables.get(name)
        if table is None:
            raise ResolutionError(f"Unknown attribute backend table {name!r}")
        return table


def get_configurable_link_repository(session=None):
    """Repository bound to the current app's session and config."""
    session = session if session is not None else db.session
    return ConfigurableLinkRepository(
        session,
        RelationProcessor(session),
        pool_from_config(current_app.config),
    )
