from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class LabelForm(str, Enum):
    SIDE_PREFIX = "side_prefix"
    SIDE_SUFFIX = "side_suffix"
    NUMERIC = "numeric"


@dataclass(frozen=True, slots=True)
class TrackLabelParse:
    """Outcome of parsing one track label.

    ``track_number`` is ``None`` exactly when the label is unparseable; 0 is a
    valid track number. ``reason`` names why a label was rejected and is meant
    for callers that want to log it.
    """

    label: object
    track_number: Optional[int] = None
    form: Optional[LabelForm] = None
    reason: Optional[str] = None

    @property
    def parsed(self) -> bool:
        return self.track_number is not None


@dataclass(slots=True)
class ResolvedTrackNumber:
    track_number: Optional[int] = None
    source: Optional[str] = None
    label: Optional[str] = None
    form: Optional[LabelForm] = None
    rejected: List[Tuple[str, str, str]] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.track_number is not None

    def to_record(self) -> dict[str, object]:
        return {
            "track_number": self.track_number,
            "source": self.source,
            "label": self.label,
            "form": self.form.value if self.form else None,
            "rejected": [
                {"field": name, "label": label, "reason": reason}
                for name, label, reason in self.rejected
            ],
        }
