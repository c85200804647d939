"""Tests for histogram statistics."""

from subsector.analysis.histogram import Histogram, world_histograms
from subsector.models import StarportClass
from subsector.utils import DiceRNG


class TestHistogram:
    """Test Histogram counting and rendering."""

    def test_counts(self):
        """Test counting and undoing counts."""
        histogram = Histogram("Rolls")
        for item in (2, 7, 7, 12):
            histogram.inc(item)
        assert histogram.counts == {2: 1, 7: 2, 12: 1}
        assert histogram.total == 4

        histogram.dec(7)
        histogram.dec(99)
        assert histogram.counts[7] == 1
        assert histogram.total == 3

    def test_domain_fixes_order(self):
        """Test a domain lists unseen items in order."""
        histogram = Histogram("Rolls", range(3))
        histogram.inc(2)
        assert list(histogram.counts) == [0, 1, 2]
        assert histogram.counts[0] == 0

    def test_percent(self):
        """Test percentages of the total."""
        histogram = Histogram("Coin", [False, True])
        assert histogram.percent(True) == 0.0
        histogram.inc(True)
        histogram.inc(False)
        assert histogram.percent(True) == 50.0

    def test_render(self):
        """Test the bar chart layout."""
        histogram = Histogram("Rolls", [1, 2, 3])
        for _ in range(4):
            histogram.inc(1)
        histogram.inc(2)

        lines = histogram.render(scale=2).split("\n")
        assert lines[0] == "Rolls"
        assert lines[1] == "=" * 60
        assert lines[2] == "    1|** (4)"
        assert lines[3] == "    2|* (1)"
        assert lines[4] == "    3| (0)"

    def test_render_percent_enum_labels(self):
        """Test enum items are labelled by value."""
        histogram = Histogram("Ports", [StarportClass.A])
        histogram.inc(StarportClass.A)
        assert histogram.render(percent=True).split("\n")[2] == "    A|* (100.00%)"


def test_world_histograms(tables):
    """Test every attribute histogram counts every world."""
    histograms = world_histograms(tables, DiceRNG(42), 500)
    for key in ("gas_giant", "size", "atmosphere", "population", "starport", "tech_level"):
        assert histograms[key].total == 500
    assert sum(histograms["size"].counts.values()) == 500
    assert set(histograms["size"].counts) == set(range(11))
