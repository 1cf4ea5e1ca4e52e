import logging
from typing import Callable, List

log = logging.getLogger(__name__)

Observer = Callable[[], None]


class ChangeNotifier:
    def __init__(self) -> None:
        self.observers: List[Observer] = []

    def subscribe(self, callback: Observer) -> Observer:
        self.observers.append(callback)
        return callback

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self.observers:
            self.observers.remove(callback)

    def notify(self) -> None:
        # Snapshot so callbacks may (un)subscribe while being notified
        for callback in list(self.observers):
            try:
                callback()
            except Exception:
                log.exception(f"Change observer {callback!r} failed")
