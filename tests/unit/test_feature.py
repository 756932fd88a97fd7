import pytest
from matepair.constants import STRAND
from matepair.feature import Feature


@pytest.fixture
def feature():
    return Feature('sq0', 8, 13, STRAND.POS)


class TestFeature:
    def test_attributes(self, feature):
        assert feature.reference_name == 'sq0'
        assert feature.start == 8
        assert feature.end == 13
        assert feature.strand == STRAND.POS

    def test_len(self, feature):
        assert len(feature) == 6

    def test_len_single_position(self):
        assert len(Feature('sq0', 1, 1, STRAND.NEG)) == 1

    def test_is_empty(self, feature):
        assert Feature('sq0', 1, 1, STRAND.POS).is_empty()
        assert not feature.is_empty()

    def test_extend_end(self, feature):
        feature.end += 7
        assert feature.end == 20
        assert len(feature) == 13

    def test_default_strand(self):
        assert Feature('sq0', 1, 5).strand == STRAND.NS

    def test_bad_strand(self):
        with pytest.raises(KeyError):
            Feature('sq0', 1, 5, 'forward')

    def test_start_after_end(self):
        with pytest.raises(AttributeError):
            Feature('sq0', 10, 5, STRAND.POS)

    def test_eq(self, feature):
        assert feature == Feature('sq0', 8, 13, STRAND.POS)
        assert feature != Feature('sq0', 8, 13, STRAND.NEG)
        assert feature != Feature('sq1', 8, 13, STRAND.POS)
        assert feature != ('sq0', 8, 13, STRAND.POS)

    def test_repr(self, feature):
        assert repr(feature) == 'Feature(sq0:8-13+)'
