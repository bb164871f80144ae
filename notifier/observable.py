from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

from .change_events import ChangeRecord, Subscription
from .change_notifier import ChangeNotifier

V = TypeVar("V")


class ObservableProperty(Generic[V]):
    """
    Data descriptor that routes assignments through a per-instance ChangeNotifier.

        class Dog:
            age = ObservableProperty()

            def __init__(self, age: int) -> None:
                self.age = age      # first assignment: creates the notifier, no event
                                    # later assignments notify subscribers

    The notifier lives in the instance __dict__ under a private key, so each
    subject owns its own subscription list.
    """

    def __init__(self) -> None:
        self.name: Optional[str] = None
        self._key: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._key = f"_{name}_notifier"

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return self
        return self.notifier(instance).value

    def __set__(self, instance: Any, value: V) -> None:
        if self._key is None:
            raise TypeError(
                "ObservableProperty must be assigned in a class body so __set_name__ runs"
            )
        notifier = instance.__dict__.get(self._key)
        if notifier is None:
            instance.__dict__[self._key] = ChangeNotifier(value, name=self.name)
            return
        notifier.set_value(value)

    def notifier(self, instance: Any) -> ChangeNotifier[V]:
        try:
            return instance.__dict__[self._key]
        except KeyError:
            raise AttributeError(
                f"{type(instance).__name__!r} object has no value for {self.name!r} yet"
            ) from None


def _descriptor(subject: Any, attribute: str) -> ObservableProperty:
    prop = getattr(type(subject), attribute, None)
    if not isinstance(prop, ObservableProperty):
        raise AttributeError(
            f"{type(subject).__name__}.{attribute} is not an observable property"
        )
    return prop


def observe(subject: Any, attribute: str,
            callback: Callable[[ChangeRecord[V]], None]) -> Subscription[V]:
    """Subscribe `callback` to changes of `subject.<attribute>`."""
    return _descriptor(subject, attribute).notifier(subject).subscribe(callback)


def notifier_of(subject: Any, attribute: str) -> ChangeNotifier:
    return _descriptor(subject, attribute).notifier(subject)


def release(subject: Any) -> None:
    """Drop every subscription on every observable attribute of `subject`."""
    for klass in type(subject).__mro__:
        for attr in vars(klass).values():
            if isinstance(attr, ObservableProperty):
                notifier = subject.__dict__.get(attr._key)
                if notifier is not None:
                    notifier.close()
