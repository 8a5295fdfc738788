import pytest

from src.statement_engine.errors import ResolutionError
from src.statement_engine.identifiers import TableName
from src.statement_engine.resolution.identifier_resolver import DefaultIdentifierResolver
from src.statement_engine.session import SessionContext, UserIdentity

USER = UserIdentity("alice")


def test_fills_catalog_and_database_from_session():
    session = SessionContext(user=USER, default_catalog="internal", default_database="db")
    resolved = DefaultIdentifierResolver().resolve(TableName("t1"), session)
    assert resolved == TableName("t1", "db", "internal")


def test_explicit_parts_win_over_session_defaults():
    session = SessionContext(user=USER, default_catalog="internal", default_database="db")
    resolved = DefaultIdentifierResolver().resolve(TableName("t1", "other", "hive"), session)
    assert resolved == TableName("t1", "other", "hive")


def test_no_database_selected():
    session = SessionContext(user=USER)
    with pytest.raises(ResolutionError, match="No database selected"):
        DefaultIdentifierResolver().resolve(TableName("t1"), session)


@pytest.mark.parametrize("table", ["", "   "])
def test_empty_table_name(table):
    session = SessionContext(user=USER, default_database="db")
    with pytest.raises(ResolutionError, match="Table name is null"):
        DefaultIdentifierResolver().resolve(TableName(table), session)
