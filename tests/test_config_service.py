from __future__ import annotations

import pytest

from relschema_mcp.reflection.constants import UnknownTypePolicy
from relschema_mcp.services import ConfigService


def test_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELSCHEMA_MCP_DATABASE_URL", "mysql+pymysql://u:p@localhost/shop")
    assert ConfigService.get_database_url() == "mysql+pymysql://u:p@localhost/shop"
    monkeypatch.setenv("RELSCHEMA_MCP_DATABASE_URL", "")
    with pytest.raises(ValueError, match="not set"):
        ConfigService.get_database_url()


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, UnknownTypePolicy.DROP),
        ("drop", UnknownTypePolicy.DROP),
        ("RAISE", UnknownTypePolicy.RAISE),
        ("", UnknownTypePolicy.DROP),
    ],
)
def test_unknown_type_policy(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: UnknownTypePolicy
) -> None:
    if value is None:
        monkeypatch.delenv("RELSCHEMA_MCP_UNKNOWN_TYPES", raising=False)
    else:
        monkeypatch.setenv("RELSCHEMA_MCP_UNKNOWN_TYPES", value)
    assert ConfigService.unknown_type_policy() is expected


@pytest.mark.parametrize(
    "value,expected",
    [(None, True), ("", True), ("true", True), ("ON", True), ("0", False), ("No", False)],
)
def test_strict_foreign_keys(
    monkeypatch: pytest.MonkeyPatch, value: str | None, expected: bool
) -> None:
    if value is None:
        monkeypatch.delenv("RELSCHEMA_MCP_STRICT_FOREIGN_KEYS", raising=False)
    else:
        monkeypatch.setenv("RELSCHEMA_MCP_STRICT_FOREIGN_KEYS", value)
    assert ConfigService.strict_foreign_keys() is expected


def test_create_database_engine() -> None:
    engine = ConfigService.create_database_engine("sqlite+pysqlite:///:memory:")
    assert engine.dialect.name == "sqlite"


def test_mistyped_unknown_type_policy_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELSCHEMA_MCP_UNKNOWN_TYPES", "rasie")
    with pytest.raises(ValueError, match="must be one of drop, raise"):
        ConfigService.unknown_type_policy()


def test_non_boolean_strict_foreign_keys_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELSCHEMA_MCP_STRICT_FOREIGN_KEYS", "whatever")
    with pytest.raises(ValueError, match="must be a boolean"):
        ConfigService.strict_foreign_keys()
