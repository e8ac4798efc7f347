import logging
from abc import ABC, abstractmethod

import pandas as pd


DEFAULT_TEMPERATURE = 0.0
DEFAULT_HUMIDITY = 0.0


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float):
        pass

    @abstractmethod
    def display(self):
        pass


class Subject(ABC):
    @abstractmethod
    def register_observer(self, observer: Observer):
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer):
        pass

    @abstractmethod
    def notify_observers(self):
        pass


class WeatherStation(Subject):
    """Holds the latest measurements and the displays listening to them.

    Observers are called in registration order. Registering the same observer
    twice means it is notified twice.
    """

    def __init__(self, temperature: float = DEFAULT_TEMPERATURE, humidity: float = DEFAULT_HUMIDITY) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: Observer):
        self._observers.append(observer)
        logging.debug("Registered %s (%d observers)", type(observer).__name__, len(self._observers))

    def remove_observer(self, observer: Observer):
        # Identity match, every occurrence.
        before = len(self._observers)
        self._observers = [o for o in self._observers if o is not observer]
        logging.debug("Removed %d entries of %s", before - len(self._observers), type(observer).__name__)

    def set_state(self, temperature: float, humidity: float):
        self.temperature, self.humidity = temperature, humidity

    def notify_observers(self):
        # Observers added or removed by an update only count from the next call.
        snapshot = list(self._observers)
        logging.debug("Notifying %d observers", len(snapshot))
        for observer in snapshot:
            observer.update(self.temperature, self.humidity)

    def set_measurements(self, temperature: float, humidity: float):
        self.set_state(temperature, humidity)
        self.notify_observers()


class ConditionDisplay(Observer):
    def __init__(self) -> None:
        self.temperature = DEFAULT_TEMPERATURE
        self.humidity = DEFAULT_HUMIDITY

    def update(self, temperature: float, humidity: float):
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def render(self) -> str:
        return (
            "Current Condition Display \t\n"
            f"The current temperature is {self.temperature:g}, and the humidity is {self.humidity:g}."
        )

    def display(self):
        print(self.render())


class StatisticsDisplay(Observer):
    """Keeps every reading it receives and shows temperature aggregates."""

    columns = ["temperature", "humidity"]

    def __init__(self) -> None:
        self.temperature = DEFAULT_TEMPERATURE
        self.humidity = DEFAULT_HUMIDITY
        self.readings = pd.DataFrame(columns=self.columns, dtype=float)

    def update(self, temperature: float, humidity: float):
        self.temperature = temperature
        self.humidity = humidity
        self.readings.loc[len(self.readings)] = [temperature, humidity]
        self.display()

    def render(self) -> str:
        if self.readings.empty:
            return "No readings yet"
        temps = self.readings["temperature"]
        return f"Avg/Max/Min temperature = {temps.mean():g}/{temps.max():g}/{temps.min():g}"

    def display(self):
        print(self.render())


if __name__ == "__main__":
    station = WeatherStation()
    current = ConditionDisplay()
    stats = StatisticsDisplay()
    station.register_observer(current)
    station.register_observer(stats)
    station.set_measurements(80, 65)
    station.set_measurements(82, 70)
    station.remove_observer(current)
    station.set_measurements(78, 90)
