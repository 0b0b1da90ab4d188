from src.salon_crm.salon_crm.database.bootstrap import iter_sql_statements


def test_splits_on_semicolons_outside_quotes_and_comments():
    sql = """
    -- holidays; seeded separately
    CREATE TABLE a (id INT);
    INSERT INTO turkish_holidays VALUES ('2025-01-01', 'Yılbaşı; New Year');
    INSERT INTO b VALUES ("x;y") -- trailing; comment
    ;
    """

    statements = list(iter_sql_statements(sql))

    assert statements == [
        "CREATE TABLE a (id INT)",
        "INSERT INTO turkish_holidays VALUES ('2025-01-01', 'Yılbaşı; New Year')",
        'INSERT INTO b VALUES ("x;y")',
    ]


def test_tail_without_semicolon_is_kept():
    assert list(iter_sql_statements("SELECT 1; SELECT 2")) == ["SELECT 1", "SELECT 2"]
