from dataclasses import dataclass
from enum import Enum


class EditorMode(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    # Declared for the status bar; no key enters it yet.
    REPLACE = "replace"

    def allow_motion(self) -> bool:
        return self is EditorMode.NORMAL


class NibblePhase(Enum):
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class ModeState:
    """Editor mode plus the hex-entry nibble phase.

    Only insert mode can carry a pending low nibble; build instances through
    the classmethods so that holds.
    """

    mode: EditorMode = EditorMode.NORMAL
    phase: NibblePhase = NibblePhase.HIGH

    def __post_init__(self):
        if self.mode is not EditorMode.INSERT and self.phase is not NibblePhase.HIGH:
            raise ValueError(f"{self.mode.name} mode cannot carry a pending nibble")

    @classmethod
    def normal(cls) -> "ModeState":
        return cls(EditorMode.NORMAL)

    @classmethod
    def insert(cls, phase: NibblePhase = NibblePhase.HIGH) -> "ModeState":
        return cls(EditorMode.INSERT, phase)

    @classmethod
    def replace(cls) -> "ModeState":
        return cls(EditorMode.REPLACE)

    def allow_motion(self) -> bool:
        return self.mode.allow_motion()

    @property
    def label(self) -> str:
        return self.mode.name
