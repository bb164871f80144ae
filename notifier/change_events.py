from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .change_notifier import ChangeNotifier

V = TypeVar("V")
V_contra = TypeVar("V_contra", contravariant=True)


@dataclass(frozen=True)
class ChangeRecord(Generic[V]):
    old_value: V
    new_value: V


@runtime_checkable
class Observer(Protocol[V_contra]):
    def update(self, record: ChangeRecord[V_contra]) -> None: ...


@dataclass(eq=False)
class Subscription(Generic[V]):
    """
    Handle for one registered callback.
    Keep it around to cancel later; cancelling twice is harmless.
    """
    id: int
    callback: Callable[[ChangeRecord[V]], None]
    owner: Optional["ChangeNotifier[V]"] = field(default=None, repr=False)
    active: bool = True

    def cancel(self) -> None:
        if self.owner is not None:
            self.owner.unsubscribe(self)

    def __enter__(self) -> "Subscription[V]":
        return self

    def __exit__(self, *exc) -> None:
        self.cancel()
