from __future__ import annotations

# Tag field names the resolver looks at.
# Vorbis-style names; ID3 and MP4 tags are mapped onto these by tag_values.

TRACKNUMBER = "TRACKNUMBER"
DISCNUMBER = "DISCNUMBER"
TRACKNAME_POSITION = "TRACKNAME/POSITION"
POSITION = "POSITION"
SIDE = "SIDE"
TRACKTOTAL = "TRACKTOTAL"

# Pseudo field recorded as the source when the number came from the file name.
FILENAME = "filename"
