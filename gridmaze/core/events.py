import logging
from collections import Counter
from typing import Iterator, List, Tuple

# Event Types
EVT_INIT = 0x01
EVT_VISIT = 0x02
EVT_CARVE = 0x03
EVT_PATH_ADD = 0x04
EVT_SOLVER_SCAN = 0x06

EVENT_NAMES = {
    EVT_INIT: "init",
    EVT_VISIT: "visit",
    EVT_CARVE: "carve",
    EVT_PATH_ADD: "path_add",
    EVT_SOLVER_SCAN: "solver_scan",
}

class EventLog:
    """
    In-memory record of grid and solver events, in the order they happen.
    Carves are logged after both sides of the wall have been cleared.
    Pass a logger to also trace every event at DEBUG level.
    """
    def __init__(self, logger: logging.Logger = None):
        self.events: List[Tuple[int, Tuple]] = []
        self.logger = logger
        self.rows = 0
        self.cols = 0

    def _record(self, type_code: int, data: Tuple):
        self.events.append((type_code, data))
        if self.logger:
            self.logger.debug("%s %s", EVENT_NAMES[type_code], data)

    def write_header(self, rows: int, cols: int):
        self.rows, self.cols = rows, cols
        self._record(EVT_INIT, (rows, cols))

    def log_visit(self, row: int, col: int):
        self._record(EVT_VISIT, (row, col))

    def log_carve(self, row: int, col: int, direction: int):
        self._record(EVT_CARVE, (row, col, direction))

    def log_solver_scan(self, row: int, col: int):
        self._record(EVT_SOLVER_SCAN, (row, col))

    def log_path_add(self, row: int, col: int):
        self._record(EVT_PATH_ADD, (row, col))

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        yield from self.events

    def counts(self) -> Counter:
        return Counter(EVENT_NAMES[t] for t, _ in self.events)

    def clear(self):
        self.events.clear()

    def __len__(self):
        return len(self.events)
