"""Tests for the admin CLI commands."""
import pytest
from sqlalchemy import select

from catalog.models.super_link import SuperLink


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def tee(make_product, make_select_attribute, set_value, add_super_attribute):
    parent = make_product(700, "CLI-TEE", type_id="configurable")
    red = make_product(701, "CLI-TEE-RED")
    blue = make_product(702, "CLI-TEE-BLUE")
    make_product(703, "CLI-MUG")

    color, colors = make_select_attribute("color", ["Red", "Blue"], frontend_label="Color")
    set_value(color, red, colors["Red"])
    set_value(color, blue, colors["Blue"])
    add_super_attribute(parent.entity_id, color)
    return parent


def test_init_db(runner, db):
    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_link_children(runner, db, tee):
    result = runner.invoke(args=["link-children", "CLI-TEE", "CLI-TEE-RED", "CLI-TEE-BLUE"])

    assert result.exit_code == 0, result.output
    assert "Linked 2 children to CLI-TEE" in result.output
    pairs = db.session.execute(select(SuperLink.parent_id, SuperLink.product_id)).all()
    assert sorted(tuple(p) for p in pairs) == [(700, 701), (700, 702)]


def test_link_children_clear(runner, db, tee):
    runner.invoke(args=["link-children", "CLI-TEE", "CLI-TEE-RED"])
    result = runner.invoke(args=["link-children", "CLI-TEE", "--clear"])

    assert result.exit_code == 0, result.output
    assert db.session.execute(select(SuperLink)).first() is None


def test_link_children_needs_children_or_clear(runner, db, tee):
    result = runner.invoke(args=["link-children", "CLI-TEE"])
    assert result.exit_code != 0


def test_link_children_unknown_sku(runner, db, tee):
    result = runner.invoke(args=["link-children", "CLI-TEE", "NOPE"])
    assert result.exit_code != 0
    assert "Unknown SKU: NOPE" in result.output


def test_link_children_rejects_simple_parent(runner, db, tee):
    result = runner.invoke(args=["link-children", "CLI-MUG", "CLI-TEE-RED"])
    assert result.exit_code != 0
    assert "not a configurable product" in result.output


def test_children_and_parents(runner, db, tee):
    runner.invoke(args=["link-children", "CLI-TEE", "CLI-TEE-RED", "CLI-TEE-BLUE"])

    children = runner.invoke(args=["children", "CLI-TEE"])
    assert children.output.split() == ["701", "702"]

    parents = runner.invoke(args=["parents", "CLI-TEE-BLUE"])
    assert parents.output.split() == ["700"]


def test_options(runner, db, tee):
    runner.invoke(args=["link-children", "CLI-TEE", "CLI-TEE-RED", "CLI-TEE-BLUE"])

    result = runner.invoke(args=["options", "CLI-TEE"])

    assert result.exit_code == 0, result.output
    assert "color:" in result.output
    assert "CLI-TEE-RED (#701): Red" in result.output
    assert "CLI-TEE-BLUE (#702): Blue" in result.output
