from __future__ import annotations

from txlog.database.bootstrap import EVOLUTION_COLUMNS, read_schema_statements

TABLES = {
    "admins",
    "persons",
    "offices",
    "products",
    "repair_transactions",
    "repair_details",
    "release_details",
    "borrow_transactions",
    "return_details",
    "reservations",
    "tech4ed_sessions",
}


def test_packaged_schema_creates_every_table():
    statements = read_schema_statements()
    created = {s.split()[5] for s in statements}

    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert created == TABLES


def test_database_selection_and_comments_are_dropped(tmp_path):
    schema = tmp_path / "schema.sql"
    schema.write_text(
        "-- header\n"
        "CREATE DATABASE IF NOT EXISTS other_db;\n"
        "USE other_db;\n"
        "CREATE TABLE a (\n"
        "    id INT,\n"
        "    note VARCHAR(10) DEFAULT 'x;y'\n"
        ");\n"
        "\n"
        "CREATE TABLE b (id INT);\n",
        encoding="utf-8",
    )

    statements = read_schema_statements(schema)
    assert len(statements) == 2
    assert "DEFAULT 'x;y'" in statements[0]
    assert statements[1] == "CREATE TABLE b (id INT)"


def test_evolution_columns_are_in_the_schema():
    schema = "\n".join(read_schema_statements())
    for table, column, _ in EVOLUTION_COLUMNS:
        assert table in schema
        assert column in schema
