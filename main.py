#!/usr/bin/env python3
"""
Executa as três demonstrações de padrões GoF em sequência
"""
import sys
from pathlib import Path

# Adicionar o diretório src ao path
sys.path.append(str(Path(__file__).parent / "src"))

from patterns import singleton, decorator, observer


DEMOS = [
    ("Singleton", singleton.main),
    ("Decorator", decorator.main),
    ("Observer", observer.main),
]


def main():
    """Função principal"""
    for nome, demo in DEMOS:
        print("=" * 60)
        print(f"Padrão {nome}")
        print("=" * 60)
        demo()
        print()
    return 0


if __name__ == "__main__":
    exit(main())
