"""create catalog product, attribute and configurable link tables

Revision ID: 3f9c2d1e8a70
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2d1e8a70'
down_revision = None
branch_labels = None
depends_on = None


def _value_table(name, value_type):
    op.create_table(
        name,
        sa.Column('value_id', sa.Integer(), primary_key=True),
        sa.Column('attribute_id', sa.Integer(), nullable=False, index=True),
        sa.Column('store_id', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('entity_id', sa.Integer(), nullable=False, index=True),
        sa.Column('row_id', sa.Integer(), nullable=False, index=True),
        sa.Column('value', value_type),
        sa.UniqueConstraint('attribute_id', 'store_id', 'entity_id',
                            name=f'uq_{name.replace("catalog_", "")}'),
    )


def upgrade():
    op.create_table(
        'catalog_product_entity',
        sa.Column('entity_id', sa.Integer(), primary_key=True),
        sa.Column('row_id', sa.Integer(), nullable=False, unique=True, index=True),
        sa.Column('type_id', sa.String(32), nullable=False, server_default='simple', index=True),
        sa.Column('sku', sa.String(64), nullable=False, unique=True, index=True),
        sa.Column('has_options', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('required_options', sa.SmallInteger(), nullable=False, server_default='0'),
    )
    op.create_table(
        'eav_attribute',
        sa.Column('attribute_id', sa.Integer(), primary_key=True),
        sa.Column('attribute_code', sa.String(255), nullable=False, unique=True),
        sa.Column('backend_type', sa.String(8), nullable=False, server_default='int'),
        sa.Column('backend_table', sa.String(255)),
        sa.Column('frontend_label', sa.String(255)),
    )
    op.create_table(
        'eav_attribute_option',
        sa.Column('option_id', sa.Integer(), primary_key=True),
        sa.Column('attribute_id', sa.Integer(),
                  sa.ForeignKey('eav_attribute.attribute_id', ondelete='CASCADE'),
                  nullable=False, index=True),
        sa.Column('sort_order', sa.Integer(), server_default='0'),
    )
    op.create_table(
        'eav_attribute_option_value',
        sa.Column('value_id', sa.Integer(), primary_key=True),
        sa.Column('option_id', sa.Integer(),
                  sa.ForeignKey('eav_attribute_option.option_id', ondelete='CASCADE'),
                  nullable=False, index=True),
        sa.Column('store_id', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('value', sa.String(255)),
    )
    _value_table('catalog_product_entity_int', sa.Integer())
    _value_table('catalog_product_entity_varchar', sa.String(255))
    op.create_table(
        'catalog_product_super_attribute',
        sa.Column('product_super_attribute_id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), nullable=False, index=True),
        sa.Column('attribute_id', sa.Integer(),
                  sa.ForeignKey('eav_attribute.attribute_id', ondelete='CASCADE'),
                  nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.UniqueConstraint('product_id', 'attribute_id', name='uq_super_attribute'),
    )
    op.create_table(
        'catalog_product_super_attribute_label',
        sa.Column('value_id', sa.Integer(), primary_key=True),
        sa.Column('product_super_attribute_id', sa.Integer(),
                  sa.ForeignKey('catalog_product_super_attribute.product_super_attribute_id',
                                ondelete='CASCADE'),
                  nullable=False),
        sa.Column('store_id', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('use_default', sa.SmallInteger(), server_default='0'),
        sa.Column('value', sa.String(255)),
        sa.UniqueConstraint('product_super_attribute_id', 'store_id',
                            name='uq_super_attribute_label'),
    )
    op.create_table(
        'catalog_product_super_link',
        sa.Column('link_id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), nullable=False, index=True),
        sa.Column('parent_id', sa.Integer(), nullable=False, index=True),
        sa.UniqueConstraint('product_id', 'parent_id', name='uq_super_link_product_parent'),
    )
    op.create_table(
        'catalog_product_relation',
        sa.Column('parent_id', sa.Integer(), primary_key=True),
        sa.Column('child_id', sa.Integer(), primary_key=True, index=True),
    )


def downgrade():
    op.drop_table('catalog_product_relation')
    op.drop_table('catalog_product_super_link')
    op.drop_table('catalog_product_super_attribute_label')
    op.drop_table('catalog_product_super_attribute')
    op.drop_table('catalog_product_entity_varchar')
    op.drop_table('catalog_product_entity_int')
    op.drop_table('eav_attribute_option_value')
    op.drop_table('eav_attribute_option')
    op.drop_table('eav_attribute')
    op.drop_table('catalog_product_entity')
