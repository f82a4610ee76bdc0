import pytest

from src.law_office.law_office.core.exceptions import StoreUnavailable
from src.law_office.law_office.database.connection import DBConfig, DatabaseConnection


def test_config_defaults():
    cfg = DBConfig.from_dict({"user": "ledger", "port": "3307"})

    assert (cfg.host, cfg.port, cfg.user, cfg.database) == ("localhost", 3307, "ledger", "law_office")


def test_closed_handle_refuses_access():
    conn = DatabaseConnection(DBConfig.from_dict({}))

    with pytest.raises(StoreUnavailable):
        conn.connect()

    assert conn.open().is_open
    conn.close()
    assert not conn.is_open
    with pytest.raises(StoreUnavailable):
        conn.connect()
