"""Entity metadata: which column joins an entity's rows across tables."""
import logging

from catalog.errors import ResolutionError

logger = logging.getLogger(__name__)

PRODUCT_ENTITY_TYPE = "catalog_product"


class EntityMetadataPool:
    """Resolves the link field of registered entity types.

    ``link_fields`` maps entity type -> configured link column and
    ``tables`` maps entity type -> the SQLAlchemy ``Table`` holding its rows.
    The configured column must exist on that table.
    """

    def __init__(self, link_fields, tables):
        self._link_fields = dict(link_fields)
        self._tables = dict(tables)

    def get_link_field(self, entity_type):
        field = self._link_fields.get(entity_type)
        if not field:
            raise ResolutionError(f"No link field configured for {entity_type!r}")

        table = self._tables.get(entity_type)
        if table is None:
            raise ResolutionError(f"No entity table registered for {entity_type!r}")
        if field not in table.c:
            raise ResolutionError(
                f"Link field {field!r} is not a column of {table.name}"
            )

        logger.debug("Resolved link field for %s: %s", entity_type, field)
        return field


def pool_from_config(config):
    """Build the pool for the catalog entity types from app config."""
    from catalog.models.product import Product

    return EntityMetadataPool(
        config.get("ENTITY_LINK_FIELDS", {}),
        {PRODUCT_ENTITY_TYPE: Product.__table__},
    )
