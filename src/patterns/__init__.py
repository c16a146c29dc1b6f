"""
Padrões GoF de exemplo: Singleton, Decorator e Observer
"""
from .singleton import SingletonMeta, DatabaseConnection
from .decorator import (
    Coffee,
    SimpleCoffee,
    CoffeeDecorator,
    MilkDecorator,
    SugarDecorator,
    CustomAddition,
    CoffeeSummary,
    apply_additions,
    summarize,
    format_line,
)
from .observer import (
    WeatherObserver,
    WeatherSubject,
    WeatherStation,
    CurrentConditionsDisplay,
    StatisticsDisplay,
    TemperatureStatistics,
)

__all__ = [
    # Singleton Pattern
    'SingletonMeta',
    'DatabaseConnection',

    # Decorator Pattern
    'Coffee',
    'SimpleCoffee',
    'CoffeeDecorator',
    'MilkDecorator',
    'SugarDecorator',
    'CustomAddition',
    'CoffeeSummary',
    'apply_additions',
    'summarize',
    'format_line',

    # Observer Pattern
    'WeatherObserver',
    'WeatherSubject',
    'WeatherStation',
    'CurrentConditionsDisplay',
    'StatisticsDisplay',
    'TemperatureStatistics',
]
