"Vinyl-style track number parsing and album ordering."

from importlib import metadata

from .vinyl import parse_track_label, vinyl_track_number

__all__ = ["__version__", "parse_track_label", "vinyl_track_number"]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("vinyl-tracks")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
