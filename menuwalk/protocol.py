from typing import runtime_checkable, Protocol


@runtime_checkable
class LineReader(Protocol):
    def read_line(self, prompt: str) -> str | None: ...
