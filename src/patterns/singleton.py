"""
Padrão Singleton: uma única conexão de banco por processo
"""
from typing import Optional

from patterns.config import DATABASE_URL


class SingletonMeta(type):
    """Metaclasse que faz toda chamada a Classe() devolver a mesma instância.

    Check-then-create sem lock: não é seguro entre threads.
    """

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class DatabaseConnection(metaclass=SingletonMeta):
    """Conexão simulada, criada apenas na primeira chamada"""

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, url: str = DATABASE_URL):
        self.url = url
        print("Database Connection established")

    @classmethod
    def get_instance(cls) -> "DatabaseConnection":
        """Retorna a instância única, criando-a na primeira chamada"""
        return cls()

    def query(self, sql: str):
        print(f"Executing query: {sql}")


def main():
    db1 = DatabaseConnection.get_instance()
    db2 = DatabaseConnection.get_instance()

    db1.query("SELECT * FROM users")
    db2.query("INSERT INTO users VALUES (1, 'John')")

    print(db1 is db2)


if __name__ == "__main__":
    main()
