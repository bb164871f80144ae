from .change_events import ChangeRecord, Observer, Subscription
from .change_notifier import ChangeNotifier
from .observable import ObservableProperty, notifier_of, observe, release

__all__ = [
    "ChangeNotifier",
    "ChangeRecord",
    "ObservableProperty",
    "Observer",
    "Subscription",
    "notifier_of",
    "observe",
    "release",
]
