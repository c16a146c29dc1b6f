from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from pydantic import BaseModel


class Coffee(ABC):
    """Interface Component do padrão Decorator"""

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_cost(self) -> float:
        pass


class SimpleCoffee(Coffee):
    """Bebida base, sem adicionais"""

    def get_description(self) -> str:
        return "Simple Coffee"

    def get_cost(self) -> float:
        return 5.0


class CoffeeDecorator(Coffee):
    """Decorator base: envolve exatamente um Coffee e delega para ele"""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def get_description(self) -> str:
        return self._coffee.get_description()

    def get_cost(self) -> float:
        return self._coffee.get_cost()


# Decorators concretos
class MilkDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + " + Milk"

    def get_cost(self) -> float:
        return self._coffee.get_cost() + 1.5


class SugarDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + " + Sugar"

    def get_cost(self) -> float:
        return self._coffee.get_cost() + 0.5


class CustomAddition(CoffeeDecorator):
    """Decorator genérico para adicionais que não têm classe própria"""

    def __init__(self, coffee: Coffee, name: str, extra_cost: float = 0.0):
        super().__init__(coffee)
        self._name = name
        self._extra_cost = extra_cost

    def get_description(self) -> str:
        return f"{self._coffee.get_description()} + {self._name}"

    def get_cost(self) -> float:
        return self._coffee.get_cost() + self._extra_cost


class CoffeeSummary(BaseModel):
    """Resumo de uma bebida decorada"""
    description: str
    cost: float


def apply_additions(coffee: Coffee, names: Iterable[str],
                    extra_costs: Optional[Dict[str, float]] = None) -> Coffee:
    """Aplica os adicionais na ordem dada; o último fica por fora."""
    decorator_map = {
        "milk": MilkDecorator,
        "sugar": SugarDecorator,
    }
    extra_costs = extra_costs or {}
    for name in names:
        decorator_class = decorator_map.get(name.strip().lower())
        if decorator_class:
            coffee = decorator_class(coffee)
        else:
            coffee = CustomAddition(coffee, name, extra_costs.get(name, 0.0))
    return coffee


def summarize(coffee: Coffee) -> CoffeeSummary:
    return CoffeeSummary(description=coffee.get_description(), cost=coffee.get_cost())


def format_line(coffee: Coffee) -> str:
    return f"{coffee.get_description()} ${coffee.get_cost()}"


def main():
    coffee = SimpleCoffee()
    print(format_line(coffee))

    coffee = MilkDecorator(coffee)
    print(format_line(coffee))

    coffee = SugarDecorator(coffee)
    print(format_line(coffee))


if __name__ == "__main__":
    main()
