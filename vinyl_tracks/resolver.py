from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional

from .config import ResolverSettings
from .meta_keys import FILENAME
from .models import LabelForm, ResolvedTrackNumber
from .tag_values import collect_tag_text
from .vinyl import parse_track_label

logger = logging.getLogger(__name__)

FILENAME_LABEL_PATTERN = re.compile(r"^(?P<label>[A-Za-z]?[0-9]{1,3}[A-Za-z]?)(?:[\s._-]+(?P<title>.+))?$")


class TrackNumberResolver:
    """Picks a track number for one file from its tags, falling back to vinyl labels.

    An integer track-number field always wins. Vinyl candidates are only
    consulted when it is missing or not numeric, and the file name only when
    every tag failed.
    """

    def __init__(self, settings: Optional[ResolverSettings] = None) -> None:
        self.settings = settings or ResolverSettings()

    def resolve(self, tags: Any, path: Optional[Path] = None) -> ResolvedTrackNumber:
        fields = collect_tag_text(tags)
        result = ResolvedTrackNumber()
        for name in self.settings.standard_fields:
            value = fields.get(name)
            if value is None:
                continue
            number = _standard_track_number(value)
            if number is not None:
                result.track_number = number
                result.source = name
                result.label = value
                result.form = LabelForm.NUMERIC
                return result
            result.rejected.append((name, value, "not an integer track number"))
            logger.debug("Rejected track number %r from %s: not an integer", value, name)
        for name in self.settings.vinyl_fields:
            value = fields.get(name)
            if value is None:
                continue
            parsed = parse_track_label(value)
            numeric_allowed = name in self.settings.numeric_vinyl_fields
            if parsed.parsed and parsed.form is LabelForm.NUMERIC and not numeric_allowed:
                result.rejected.append((name, value, "numeric value in side label field"))
                logger.debug("Rejected track label %r from %s: numeric value in side label field", value, name)
                continue
            if parsed.parsed:
                logger.debug("Parsed vinyl track %r from %s as %d", value, name, parsed.track_number)
                result.track_number = parsed.track_number
                result.source = name
                result.label = value
                result.form = parsed.form
                return result
            result.rejected.append((name, value, parsed.reason or "unparseable"))
            logger.debug("Rejected track label %r from %s: %s", value, name, parsed.reason)
        if path is not None and self.settings.filename_fallback:
            self._resolve_filename(path, result)
        if not result.resolved:
            logger.debug("No track number hint for %s", path if path is not None else "<tags>")
        return result

    def _resolve_filename(self, path: Path, result: ResolvedTrackNumber) -> None:
        match = FILENAME_LABEL_PATTERN.match(path.stem)
        if not match:
            return
        label = match.group("label")
        parsed = parse_track_label(label)
        if not parsed.parsed:
            result.rejected.append((FILENAME, label, parsed.reason or "unparseable"))
            logger.debug("Rejected track label %r from file name %s: %s", label, path.name, parsed.reason)
            return
        result.track_number = parsed.track_number
        result.source = FILENAME
        result.label = label
        result.form = parsed.form


def resolve_track_number(
    tags: Any,
    path: Optional[Path] = None,
    settings: Optional[ResolverSettings] = None,
) -> ResolvedTrackNumber:
    return TrackNumberResolver(settings).resolve(tags, path)


def _standard_track_number(value: str) -> Optional[int]:
    cleaned = value.strip()
    if "/" in cleaned:
        cleaned = cleaned.split("/", 1)[0].strip()
    parsed = parse_track_label(cleaned)
    if parsed.form is LabelForm.NUMERIC:
        return parsed.track_number
    return None
