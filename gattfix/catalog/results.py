"""In-memory result log a harness writes its verdicts to."""

from typing import List

from gattfix.core.log import logging__results_log


class ResultLog:
    """Ordered log lines, each one also written to the results log file."""

    def __init__(self):
        self._lines: List[str] = []

    def log(self, line: str) -> None:
        self._lines.append(line)
        logging__results_log(line)

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "".join(line + "\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)
