import unittest
from pathlib import Path

from mutagen.id3 import ID3, TRCK, TXXX

from vinyl_tracks.config import ResolverSettings
from vinyl_tracks.models import LabelForm
from vinyl_tracks.resolver import TrackNumberResolver, resolve_track_number


class TestTrackNumberResolver(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = TrackNumberResolver()

    def test_standard_track_number_takes_precedence(self) -> None:
        result = self.resolver.resolve({"TRACKNUMBER": "7", "POSITION": "A2"})
        self.assertEqual(result.track_number, 7)
        self.assertEqual(result.source, "TRACKNUMBER")
        self.assertEqual(result.form, LabelForm.NUMERIC)

    def test_standard_track_number_with_total(self) -> None:
        result = self.resolver.resolve({"tracknumber": "03/12"})
        self.assertEqual(result.track_number, 3)

    def test_vinyl_fallback_when_standard_missing(self) -> None:
        result = self.resolver.resolve({"POSITION": "B3"})
        self.assertEqual(result.track_number, 23)
        self.assertEqual(result.source, "POSITION")
        self.assertEqual(result.label, "B3")
        self.assertEqual(result.form, LabelForm.SIDE_PREFIX)

    def test_vinyl_label_in_track_number_field(self) -> None:
        result = self.resolver.resolve({"TRACKNUMBER": "B2"})
        self.assertEqual(result.track_number, 22)
        self.assertEqual(result.source, "TRACKNUMBER")
        self.assertIn(("TRACKNUMBER", "B2", "not an integer track number"), result.rejected)

    def test_vinyl_fields_follow_configured_order(self) -> None:
        tags = {"TRACKNAME/POSITION": "A1", "TRACKTOTAL": "B2", "POSITION": "C3"}
        self.assertEqual(self.resolver.resolve(tags).source, "TRACKNAME/POSITION")
        resolver = TrackNumberResolver(ResolverSettings(vinyl_fields=["tracktotal", "position"]))
        result = resolver.resolve(tags)
        self.assertEqual(result.track_number, 22)
        self.assertEqual(result.source, "TRACKTOTAL")

    def test_rejected_candidates_are_recorded(self) -> None:
        result = self.resolver.resolve({"TRACKNAME/POSITION": "Side A", "POSITION": "1A"})
        self.assertEqual(result.track_number, 1)
        self.assertEqual(result.rejected, [("TRACKNAME/POSITION", "Side A", "unrecognized format")])

    def test_rejections_are_logged_at_debug(self) -> None:
        with self.assertLogs("vinyl_tracks.resolver", level="DEBUG") as logs:
            self.resolver.resolve({"POSITION": "A1B"})
        self.assertTrue(any("A1B" in line for line in logs.output))

    def test_rejected_standard_track_number_is_logged(self) -> None:
        with self.assertLogs("vinyl_tracks.resolver", level="DEBUG") as logs:
            result = self.resolver.resolve({"TRACKNUMBER": "x", "POSITION": "A1"})
        self.assertEqual(result.track_number, 1)
        self.assertTrue(any("'x'" in line and "TRACKNUMBER" in line for line in logs.output))

    def test_track_total_count_is_not_a_position(self) -> None:
        result = self.resolver.resolve({"TRACKTOTAL": "12"}, Path("/music/03 - Song.flac"))
        self.assertEqual(result.track_number, 3)
        self.assertEqual(result.source, "filename")
        self.assertIn(("TRACKTOTAL", "12", "numeric value in side label field"), result.rejected)

    def test_numeric_values_only_accepted_in_allowed_vinyl_fields(self) -> None:
        self.assertIsNone(self.resolver.resolve({"POSITION": "7", "SIDE": "04"}).track_number)
        self.assertEqual(self.resolver.resolve({"TRACKTOTAL": "B2"}).track_number, 22)
        resolver = TrackNumberResolver(ResolverSettings(numeric_vinyl_fields=["position"]))
        result = resolver.resolve({"POSITION": "7"})
        self.assertEqual(result.track_number, 7)
        self.assertEqual(result.source, "POSITION")

    def test_no_hint_is_not_an_error(self) -> None:
        result = self.resolver.resolve({"TITLE": "Interlude", "POSITION": "ABC"})
        self.assertFalse(result.resolved)
        self.assertIsNone(result.track_number)
        self.assertIsNone(result.source)
        self.assertEqual(self.resolver.resolve(None).track_number, None)

    def test_filename_fallback(self) -> None:
        result = self.resolver.resolve({}, Path("/music/album/B2 - Girl Most Likely To.flac"))
        self.assertEqual(result.track_number, 22)
        self.assertEqual(result.source, "filename")
        result = self.resolver.resolve({}, Path("/music/album/05. Hand In Hand.flac"))
        self.assertEqual(result.track_number, 5)

    def test_filename_fallback_bare_label_stem(self) -> None:
        self.assertEqual(self.resolver.resolve({}, Path("/music/B2.flac")).track_number, 22)
        self.assertEqual(self.resolver.resolve({}, Path("/music/03.flac")).track_number, 3)
        self.assertIsNone(self.resolver.resolve({}, Path("/music/Interlude.flac")).track_number)

    def test_filename_fallback_only_after_tags(self) -> None:
        result = self.resolver.resolve({"POSITION": "A3"}, Path("/music/B2 - Song.flac"))
        self.assertEqual(result.track_number, 3)

    def test_filename_fallback_rejects_malformed_label(self) -> None:
        result = self.resolver.resolve({}, Path("/music/A1B - Song.flac"))
        self.assertIsNone(result.track_number)
        self.assertEqual(result.rejected, [("filename", "A1B", "unrecognized format")])

    def test_filename_fallback_can_be_disabled(self) -> None:
        resolver = TrackNumberResolver(ResolverSettings(filename_fallback=False))
        self.assertIsNone(resolver.resolve({}, Path("/music/B2 - Song.flac")).track_number)

    def test_resolves_from_id3_tags(self) -> None:
        tags = ID3()
        tags.add(TXXX(encoding=3, desc="TRACKNAME/POSITION", text=["C3"]))
        self.assertEqual(resolve_track_number(tags).track_number, 43)
        tags.add(TRCK(encoding=3, text=["5"]))
        self.assertEqual(resolve_track_number(tags).track_number, 5)

    def test_to_record(self) -> None:
        record = self.resolver.resolve({"POSITION": "2B"}).to_record()
        self.assertEqual(
            record,
            {"track_number": 22, "source": "POSITION", "label": "2B", "form": "side_suffix", "rejected": []},
        )


if __name__ == "__main__":
    unittest.main()
