from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pydantic import BaseModel

from patterns.config import STATISTICS_MAX_SENTINEL, STATISTICS_MIN_SENTINEL


class WeatherObserver(ABC):
    @abstractmethod
    def update(self, temperature: float):
        pass


class WeatherSubject(ABC):
    @abstractmethod
    def register_observer(self, observer: WeatherObserver):
        pass

    @abstractmethod
    def remove_observer(self, observer: WeatherObserver):
        pass

    @abstractmethod
    def notify_observers(self):
        pass


class WeatherStation(WeatherSubject):
    """Subject: guarda a temperatura e avisa os observers a cada mudança"""

    def __init__(self):
        self._temperature = 0.0
        self._observers: List[WeatherObserver] = []

    @property
    def temperature(self) -> float:
        """Só muda via set_temperature(), que também notifica"""
        return self._temperature

    @property
    def observers(self) -> Tuple[WeatherObserver, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: WeatherObserver):
        self._observers.append(observer)

    def remove_observer(self, observer: WeatherObserver):
        """Remove a primeira ocorrência; se não estiver registrado, não faz nada"""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self):
        # Rodada fixa: quem entrar ou sair durante update() vale para a próxima
        for observer in tuple(self._observers):
            observer.update(self._temperature)

    def set_temperature(self, temperature: float):
        self._temperature = float(temperature)
        self.notify_observers()


class CurrentConditionsDisplay(WeatherObserver):
    def update(self, temperature: float):
        print(f"Current conditions: {temperature}F degrees")


class TemperatureStatistics(BaseModel):
    """Snapshot das estatísticas acumuladas"""
    average: Optional[float] = None
    maximum: float
    minimum: float
    readings: int = 0


class StatisticsDisplay(WeatherObserver):
    """Observer com média, máxima e mínima acumuladas.

    As sentinelas padrão (0.0 e 200.0) vêm da configuração. Leituras acima
    de min_sentinel nunca viram mínima e leituras abaixo de max_sentinel
    nunca viram máxima; passe sentinelas mais largas se for o caso.
    """

    def __init__(self, max_sentinel: float = STATISTICS_MAX_SENTINEL,
                 min_sentinel: float = STATISTICS_MIN_SENTINEL):
        self.max_temp = max_sentinel
        self.min_temp = min_sentinel
        self.temp_sum = 0.0
        self.num_readings = 0

    def update(self, temperature: float):
        self.temp_sum += temperature
        self.num_readings += 1
        if temperature > self.max_temp:
            self.max_temp = temperature
        if temperature < self.min_temp:
            self.min_temp = temperature
        self.display()

    def statistics(self) -> TemperatureStatistics:
        average = self.temp_sum / self.num_readings if self.num_readings else None
        return TemperatureStatistics(
            average=average,
            maximum=self.max_temp,
            minimum=self.min_temp,
            readings=self.num_readings
        )

    def display(self):
        stats = self.statistics()
        average = stats.average if stats.average is not None else float("nan")
        print(f"Avg/Max/Min temperature = {average}/{stats.maximum}/{stats.minimum}")


def main():
    weather_station = WeatherStation()

    current_display = CurrentConditionsDisplay()
    statistics_display = StatisticsDisplay()

    weather_station.register_observer(current_display)
    weather_station.register_observer(statistics_display)

    weather_station.set_temperature(80)
    weather_station.set_temperature(82)
    weather_station.set_temperature(78)


if __name__ == "__main__":
    main()
