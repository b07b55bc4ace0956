from dataclasses import dataclass
from typing import Any, Iterable, Literal, Optional

StageName = Literal[
    "input", "new number", "new segment", "add", "multiply",
    "flip", "modify", "re-merge", "finalize",
]


class Stage:
    INPUT: StageName = "input"
    NEW_NUMBER: StageName = "new number"
    NEW_SEGMENT: StageName = "new segment"
    ADD: StageName = "add"
    MULTIPLY: StageName = "multiply"
    FLIP: StageName = "flip"
    MODIFY: StageName = "modify"
    REMERGE: StageName = "re-merge"
    FINALIZE: StageName = "finalize"


@dataclass
class StageResult:
    stage: StageName
    new: Optional[str] = None
    prev: "StageResult | None" = None
    ctx: Any = None
    position: Optional[int] = None

    def get_explanation(self, log_context: bool | Iterable[StageName] = True):
        ctx = (self.stage + ((f"({self.ctx!r})" if self.ctx else "") if log_context is True or (log_context and self.stage in log_context) else ""))
        if ctx:
            ctx += ": "
        at = f"@{self.position} " if self.position is not None else ""
        return f"{at}{ctx}{self.old} -> {self.content}"

    @property
    def content(self):
        return self.new if isinstance(self.new, str) else self.old

    @property
    def old(self):
        return self.prev.content if isinstance(self.prev, StageResult) else ""

    def __str__(self):
        return self.content

    def __repr__(self):
        return f"StageResult(stage={self.stage!r}, new={self.new!r}, ctx={self.ctx!r})"

    def precursors(self, max_levels: int | None = None) -> list["StageResult"]:
        prevs = []
        node = self.prev
        while isinstance(node, StageResult) and (max_levels is None or len(prevs) < max_levels):
            prevs.append(node)
            node = node.prev
        return prevs

    @property
    def history(self) -> list["StageResult"]:
        return list(reversed(self.precursors())) + [self]

    def __iter__(self):
        return iter(self.history)

    def __getitem__(self, n: int | slice):
        # self[-1] is self, self[-2] is self.prev, etc.
        return self.history[n]

    def explain(self, log_context: bool | Iterable[StageName] = True) -> str:
        return "\n".join(r.get_explanation(log_context) for r in self.history)


class Trace:
    """Appends stage results to a chain; a disabled trace records nothing."""

    def __init__(self, text: str, enabled: bool = True):
        self.enabled = enabled
        self.last: StageResult | None = StageResult(Stage.INPUT, new=repr(text)) if enabled else None

    def record(self, stage: StageName, new: Any, ctx: Any = None, position: int | None = None) -> None:
        if not self.enabled:
            return
        self.last = StageResult(stage, new=str(new), prev=self.last, ctx=ctx, position=position)
