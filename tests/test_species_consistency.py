"""
Species Consistency Checker Tests
=================================
"""

import pytest

from florasense.domain.exceptions import NotFoundError
from florasense.domain.species_ideals import SPECIES_IDEALS, IdealRange, get_species_profile
from florasense.enums import ConsistencyStatus, Species
from florasense.services.ai.species_consistency import SpeciesConsistencyChecker


@pytest.fixture
def checker():
    return SpeciesConsistencyChecker()


class TestSpeciesIdeals:
    def test_every_species_has_a_profile(self):
        assert set(SPECIES_IDEALS) == set(Species)

    def test_lookup_by_name(self):
        profile = get_species_profile("Sunflower")

        assert profile.light.ideal == 10
        assert profile.height.max == 300

    def test_unknown_species(self):
        with pytest.raises(NotFoundError):
            get_species_profile("Orchid")

    def test_range_bounds_are_inclusive(self):
        ideal = IdealRange(ideal=6.5, min=6.0, max=7.0, unit="pH")

        assert ideal.contains(6.0)
        assert ideal.contains(7.0)
        assert not ideal.contains(7.01)


class TestSpeciesConsistencyChecker:
    def test_ideal_rose_is_consistent(self, checker, make_observation):
        result = checker.check(make_observation())

        assert result.is_consistent
        assert result.message == "Consistent with Species Requirements"
        assert [d.parameter for d in result.details] == ["moisture", "ph", "light", "height"]

    def test_out_of_range_reading_warns(self, checker, make_observation):
        result = checker.check(make_observation(moisture=30))

        assert not result.is_consistent
        statuses = {d.parameter: d.status for d in result.details}
        assert statuses["moisture"] == ConsistencyStatus.WARNING
        assert statuses["ph"] == ConsistencyStatus.CONSISTENT
        assert "mismatch" in result.message

    def test_detail_rendering(self, checker, make_observation):
        detail = checker.check(make_observation(height=120)).to_dict()["details"][3]

        assert detail["label"] == "Plant Height"
        assert detail["status"] == "warning"
        assert detail["user"] == "120 cm"
        assert detail["range"] == "(40 - 100 cm)"

    def test_uses_species_of_observation(self, checker, make_observation):
        # 150 cm is far too tall for a rose but ideal for a sunflower
        result = checker.check(make_observation(species=Species.SUNFLOWER, height=150, light=10, moisture=55))

        assert result.species == "Sunflower"
        assert result.is_consistent
