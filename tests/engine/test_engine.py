import logging
import threading

import pytest

from sqlident.dialects import MSSQLDialect, MySQLDialect, PostgresDialect, SQLiteDialect
from sqlident.engine import Engine, QuoteConfig, QuoteConfigurationError
from sqlident.quoting import DialectQuoter, QuoteMode, QuotePolicy, quote, quote_columns, quote_join_func, unquote


def test_engine_forwards_to_dialect():
    engine = Engine(MySQLDialect())
    assert engine.quotes() == ("`", "`")
    assert engine.quote_mode is QuoteMode.TABLE_AND_COLUMNS
    assert engine.quote_policy is QuotePolicy.ADD_ALWAYS
    assert engine.is_reserved("select")
    assert not engine.is_reserved("users")


def test_engine_quote_defaults_to_table():
    engine = Engine(PostgresDialect(), quote_mode=QuoteMode.COLUMNS_ONLY)
    assert engine.quote("users") == "users"
    assert engine.quote("users", is_column=True) == '"users"'


def test_engine_add_reserved_policy():
    engine = Engine(SQLiteDialect(), quote_policy=QuotePolicy.ADD_RESERVED)
    assert engine.quote("order", is_column=True) == '"order"'
    assert engine.quote("Order", is_column=True) == '"Order"'
    assert engine.quote("customer", is_column=True) == "customer"


def test_engine_is_a_quoter_for_module_helpers():
    engine = Engine(MSSQLDialect())
    assert quote(engine, "dbo.orders", False) == "[dbo].[orders]"
    assert quote_columns(engine, "a,b") == "[a],[b]"
    assert unquote(engine, "[orders]") == "orders"


def test_engine_batch_forwarders():
    engine = Engine(MySQLDialect())
    assert engine.quote_columns("a,b,c") == "`a`,`b`,`c`"
    assert engine.quote_join(["id", '"name"']) == '`id`,`"name"`'
    assert engine.unquote("`id`") == "id"


def test_engine_quoter_matches_engine_configuration():
    engine = Engine(PostgresDialect(), quote_mode=QuoteMode.TABLE_ONLY, quote_policy=QuotePolicy.ADD_RESERVED)
    quoter = engine.quoter()
    assert isinstance(quoter, DialectQuoter)
    assert quoter.quote_mode is QuoteMode.TABLE_ONLY
    assert quoter.quote_policy is QuotePolicy.ADD_RESERVED
    assert quote(quoter, "user", False) == engine.quote("user")


def test_engines_with_different_policies_coexist():
    dialect = PostgresDialect()
    always = Engine(dialect)
    never = Engine(dialect, quote_policy=QuotePolicy.NO_ADD)
    assert always.quote("users") == '"users"'
    assert never.quote("users") == "users"


def test_engine_from_config():
    config = QuoteConfig(quote_mode=QuoteMode.TABLE_ONLY, quote_policy=QuotePolicy.NO_ADD)
    engine = Engine.from_config(MySQLDialect(), config)
    assert engine.quote_mode is QuoteMode.TABLE_ONLY
    assert engine.quote_policy is QuotePolicy.NO_ADD


def test_engine_from_env(monkeypatch):
    monkeypatch.setenv("SQLIDENT_QUOTE_POLICY", "add_reserved")
    monkeypatch.delenv("SQLIDENT_QUOTE_MODE", raising=False)
    engine = Engine.from_env(PostgresDialect())
    assert engine.quote_policy is QuotePolicy.ADD_RESERVED
    assert engine.quote("select") == '"select"'
    assert engine.quote("users") == "users"


def test_engine_logs_configuration(caplog):
    caplog.set_level(logging.DEBUG, logger="sqlident.engine")
    Engine(MSSQLDialect(), quote_policy=QuotePolicy.ADD_RESERVED)
    assert any(
        "mssql" in record.message and "add_reserved" in record.message
        for record in caplog.records
    )


def test_quote_join_func_with_engine_closure():
    engine = Engine(PostgresDialect())
    result = quote_join_func(["a", "b"], lambda col: engine.quote(col, True), ",")
    assert result == '"a", "b"'


def test_engine_concurrent_quoting():
    engine = Engine(MSSQLDialect())
    results: list[str] = []
    lock = threading.Lock()

    def worker(index: int) -> None:
        value = engine.quote(f"schema.table_{index}")
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(results) == sorted(f"[schema].[table_{i}]" for i in range(16))


def test_engine_accepts_string_settings():
    engine = Engine(PostgresDialect(), quote_mode="table_only", quote_policy="Add-Reserved")
    assert engine.quote_mode is QuoteMode.TABLE_ONLY
    assert engine.quote_policy is QuotePolicy.ADD_RESERVED
    assert engine.quote("select") == '"select"'
    assert engine.quote("select", is_column=True) == "select"


def test_engine_rejects_unknown_string_settings():
    with pytest.raises(QuoteConfigurationError):
        Engine(PostgresDialect(), quote_policy="sometimes")


class MinimalDialect:
    def quote(self, value: str = "") -> str:
        return f"<{value}>"

    def is_reserved(self, value: str) -> bool:
        return False


def test_engine_needs_only_quote_pair_and_reserved_test(caplog):
    caplog.set_level(logging.DEBUG, logger="sqlident.engine")
    engine = Engine(MinimalDialect())
    assert engine.quotes() == ("<", ">")
    assert engine.quote("a.b") == "<a>.<b>"
    assert any("MinimalDialect" in record.message for record in caplog.records)
