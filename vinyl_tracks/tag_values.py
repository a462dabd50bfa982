from __future__ import annotations

from typing import Any, Dict, Optional

from mutagen.id3 import ID3
from mutagen.mp4 import MP4Tags

from .meta_keys import DISCNUMBER, TRACKNUMBER

MP4_FREEFORM_PREFIX = "----:"


def collect_tag_text(tags: Any) -> Dict[str, str]:
    """Flatten loaded tags into upper-cased field names and their first text value.

    Works on mutagen ``ID3`` and ``MP4Tags`` objects, Vorbis comment dicts and
    plain mappings. Nothing is read from disk here; callers pass tags they
    already loaded.
    """
    if tags is None:
        return {}
    if isinstance(tags, ID3):
        return _collect_id3(tags)
    if isinstance(tags, MP4Tags):
        return _collect_mp4(tags)
    result: Dict[str, str] = {}
    for key in tags.keys():
        text = first_text(tags[key])
        if text is not None:
            result.setdefault(str(key).strip().upper(), text)
    return result


def first_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        for item in value:
            text = first_text(item)
            if text is not None:
                return text
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip()
    return text or None


def _collect_id3(tags: ID3) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for frame_id, name in (("TRCK", TRACKNUMBER), ("TPOS", DISCNUMBER)):
        text = _id3_text(tags, frame_id)
        if text is not None:
            result[name] = text
    for frame in tags.getall("TXXX"):
        desc = (frame.desc or "").strip().upper()
        text = first_text(list(frame.text))
        if desc and text is not None:
            result.setdefault(desc, text)
    return result


def _id3_text(tags: ID3, frame_id: str) -> Optional[str]:
    frame = tags.getall(frame_id)
    if not frame:
        return None
    return first_text(list(frame[0].text)) if frame[0].text else None


def _collect_mp4(tags: MP4Tags) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for atom, name in (("trkn", TRACKNUMBER), ("disk", DISCNUMBER)):
        pair = tags.get(atom)
        if pair and isinstance(pair, list):
            first = pair[0]
            if isinstance(first, (tuple, list)) and first and first[0]:
                result[name] = str(first[0])
    for key in tags.keys():
        if not key.startswith(MP4_FREEFORM_PREFIX):
            continue
        name = key.rsplit(":", 1)[-1].strip().upper()
        text = first_text(tags[key])
        if name and text is not None:
            result.setdefault(name, text)
    return result
