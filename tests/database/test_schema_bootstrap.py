import pytest

from hrms.container import build_container
from hrms.database.bootstrap import SCHEMA_PATH, _strip_create_db_and_use, iter_sql_statements


def test_splitter_respects_quotes_and_comments():
    sql = """
    -- leading comment
    INSERT INTO t VALUES ('a;b');  -- trailing
    INSERT INTO t VALUES ("c;d");
    SELECT 1
    """

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_schema_file_yields_the_four_tables():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert len(statements) == 4
    for table in ("employees", "attendance_records", "leave_requests", "payroll_records"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table}" in s for s in statements)


def test_mysql_backend_builds_without_connecting():
    container = build_container(backend="mysql", db_config={"database": "hrms_ci", "port": "3307"})

    assert container.conn.config.database == "hrms_ci"
    assert container.conn.config.port == 3307


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        build_container(backend="sqlite")
