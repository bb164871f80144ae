"""
Demonstration driver: one dog, two observers, one birthday.

Both the walker and the groomer hold a reference to the same dog and keep
their own subscription to its `age`. Incrementing the age notifies them in
the order they subscribed.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

from .change_events import ChangeRecord, Subscription
from .config import settings
from .logging_setup import setup_logging
from .metrics import render_prometheus
from .observable import ObservableProperty, observe, release
from .observers import LogObserver


class Dog:
    age = ObservableProperty()

    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age


class DogWalker:
    def __init__(self, dog: Dog) -> None:
        self.dog = dog
        self.birthday_observation: Optional[Subscription[int]] = observe(dog, "age", self._on_birthday)

    def _on_birthday(self, change: ChangeRecord[int]) -> None:
        print(f"Hey {self.dog.name}, happy {change.new_value} birthday from the dog walker.")
        print(f"dogWalker: Old value is {change.old_value}")
        print(f"dogWalker: New value is {change.new_value}")

    def stop_observing(self) -> None:
        if self.birthday_observation is not None:
            self.birthday_observation.cancel()
            self.birthday_observation = None


class DogGroomer:
    def __init__(self, dog: Dog) -> None:
        self.dog = dog
        self.birthday_observation: Optional[Subscription[int]] = observe(dog, "age", self._on_birthday)

    def _on_birthday(self, change: ChangeRecord[int]) -> None:
        print(f"Hey {self.dog.name}, happy {change.new_value} birthday from the dog groomer.")
        print(f"groomer oldValue: {change.old_value}")
        print(f"groomer newValue: {change.new_value} \n")

    def stop_observing(self) -> None:
        if self.birthday_observation is not None:
            self.birthday_observation.cancel()
            self.birthday_observation = None


def build(name: str, age: int) -> Tuple[Dog, DogWalker, DogGroomer]:
    dog = Dog(name, age)
    return dog, DogWalker(dog), DogGroomer(dog)


def run(name: str = "Snoopy", age: int = 5) -> Tuple[Dog, DogWalker, DogGroomer]:
    dog, walker, groomer = build(name, age)
    dog.age += 1
    return dog, walker, groomer


def main() -> int:
    setup_logging(
        app=settings.app_name,
        level=settings.log_level,
        stream_json=settings.log_json,
        filename=settings.log_file or None,
        file_json=settings.log_file_json,
        max_bytes=settings.log_max_bytes,
        backups=settings.log_backups,
    )
    logging.info("[demo] %s turns %d today", settings.dog_name, settings.dog_age + 1)

    dog, walker, groomer = build(settings.dog_name, settings.dog_age)
    observe(dog, "age", LogObserver("demo.age").update)

    dog.age += 1

    walker.stop_observing()
    groomer.stop_observing()
    release(dog)

    if settings.metrics_dump:
        sys.stdout.write(render_prometheus().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
