"""Tests for the compiled-in tip catalog."""

from cardkernel.engine.tips import TIPS, get_tip, list_tips, tip_ids


class TestCatalog:
    def test_fifty_tips(self):
        assert len(list_tips()) == 50

    def test_ids_unique_and_contiguous(self):
        assert tip_ids() == list(range(1, 51))

    def test_every_tip_has_text(self):
        for tip in TIPS:
            assert tip.icon
            assert tip.title
            assert tip.subtitle

    def test_ids_of_custom_catalog(self):
        assert tip_ids(TIPS[:3]) == [1, 2, 3]

    def test_get_known(self):
        tip = get_tip(22)
        assert tip is not None
        assert tip.title == "Heart Health"

    def test_get_unknown(self):
        assert get_tip(0) is None
        assert get_tip(51) is None
