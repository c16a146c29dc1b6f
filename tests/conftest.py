import pytest

from patterns.singleton import DatabaseConnection


@pytest.fixture
def fresh_singleton(monkeypatch):
    """Garante que o próximo get_instance() crie a conexão do zero"""
    monkeypatch.setattr(DatabaseConnection, "_instance", None)
    return DatabaseConnection
