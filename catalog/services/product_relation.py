"""Generic parent/child product relation index."""
import logging

from sqlalchemy import delete, select

from catalog.models.relation import ProductRelation
from catalog.services.db_utils import insert_on_duplicate

logger = logging.getLogger(__name__)


class RelationProcessor:
    def __init__(self, session):
        self.session = session
        self.table = ProductRelation.__table__

    def get_child_ids(self, parent_id):
        stmt = select(self.table.c.child_id).where(self.table.c.parent_id == parent_id)
        return [int(child_id) for child_id in self.session.execute(stmt).scalars()]

    def add_relations(self, parent_id, child_ids):
        rows = [{"parent_id": int(parent_id), "child_id": int(c)} for c in child_ids]
        if rows:
            insert_on_duplicate(self.session, self.table, rows, ["parent_id", "child_id"])
        return self

    def remove_relations(self, parent_id, child_ids):
        child_ids = [int(c) for c in child_ids]
        if child_ids:
            self.session.execute(
                delete(self.table).where(
                    self.table.c.parent_id == parent_id,
                    self.table.c.child_id.in_(child_ids),
                )
            )
        return self

    def process_relations(self, parent_id, child_ids):
        """Make the relations of ``parent_id`` exactly ``child_ids``."""
        wanted = {int(c) for c in child_ids}
        existing = set(self.get_child_ids(parent_id))

        to_add = sorted(wanted - existing)
        to_remove = sorted(existing - wanted)
        self.add_relations(parent_id, to_add)
        self.remove_relations(parent_id, to_remove)

        if to_add or to_remove:
            logger.debug(
                "Relations of %s: +%d -%d", parent_id, len(to_add), len(to_remove)
            )
        return self
