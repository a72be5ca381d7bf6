# plainstate/reactivity/dep.py

from typing import Callable, List


class Dep:
    """
    Subscriber list for a single reactive source.
    """
    def __init__(self):
        self._subscribers: List[Callable[..., None]] = []

    def subscribe(self, callback: Callable[..., None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self, *args):
        # Copy so a callback may unsubscribe itself
        for callback in list(self._subscribers):
            callback(*args)

    def __len__(self) -> int:
        return len(self._subscribers)
