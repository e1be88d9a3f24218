"""Run history persistence and queries."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from puzzlesearch.models.result import SearchResult


@dataclass
class RunRecord:
    board: str
    strategy: str
    outcome: str
    states: int
    path_length: int
    time: float
    date: str

    @classmethod
    def from_result(cls, root: str, result: SearchResult, date: str) -> RunRecord:
        return cls(
            board=root,
            strategy=str(result.strategy),
            outcome=str(result.outcome),
            states=result.states_explored,
            path_length=max(len(result.path) - 1, 0),
            time=round(result.elapsed, 3),
            date=date,
        )


class RunLog:
    """Loads, saves, and queries recorded search runs from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._runs: dict[str, list[RunRecord]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            for strategy, entries in data.items():
                self._runs[strategy] = [RunRecord(**e) for e in entries]

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            strategy: [asdict(e) for e in entries]
            for strategy, entries in self._runs.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_run(self, record: RunRecord) -> None:
        runs = self._runs.setdefault(record.strategy, [])
        runs.append(record)
        runs.sort(key=lambda e: (e.board, e.states, e.time))
        self.save()

    def get_runs(self, strategy: str) -> list[RunRecord]:
        return self._runs.get(strategy, [])

    def get_all_strategies(self) -> list[str]:
        return sorted(self._runs)
