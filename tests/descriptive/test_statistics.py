"""
Tests for SampleStatistics, PopulationStatistics and the deviation kinds.
"""

import warnings
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from sumstats.core.exceptions import InsufficientDataError
from sumstats.descriptive import (
    GetStatistics,
    ObservationDesign,
    Population,
    PopulationStatistics,
    Sample,
    SampleStatistics,
    population_standard_deviation,
    sample_standard_deviation,
)
from sumstats.descriptive.backends.cpu import CPUDescriptiveBackend


class TestSampleStatistics:

    def test_from_array(self, four_obs):
        samp = SampleStatistics.from_array(four_obs)
        assert samp.n == 4
        assert samp.sample_mean == pytest.approx(5.775, rel=1e-15)
        assert samp.standard_error == pytest.approx(3.4807805638007885, rel=1e-14)

    def test_standard_error_of_mean(self, four_obs):
        samp = SampleStatistics.from_array(four_obs)
        assert samp.standard_error_of_mean == pytest.approx(
            3.4807805638007885 / 2.0, rel=1e-14
        )

    def test_frozen(self, four_obs):
        samp = SampleStatistics.from_array(four_obs)
        with pytest.raises(FrozenInstanceError):
            samp.n = 10

    def test_deterministic(self, rng):
        x = rng.standard_normal(30)
        assert SampleStatistics.from_array(x) == SampleStatistics.from_array(x)

    def test_accepts_design(self, four_obs):
        design = ObservationDesign.from_array(four_obs)
        assert SampleStatistics.from_array(design) == SampleStatistics.from_array(four_obs)

    def test_strict_singleton(self):
        with pytest.raises(InsufficientDataError):
            SampleStatistics.from_array([1.0])

    def test_permissive_singleton(self):
        with pytest.warns(RuntimeWarning):
            samp = SampleStatistics.from_array([1.0], policy="permissive")
        assert samp.n == 1
        assert samp.sample_mean == 1.0
        assert np.isnan(samp.standard_error)

    def test_permissive_empty(self):
        with pytest.warns(RuntimeWarning):
            samp = SampleStatistics.from_array([], policy="permissive")
        assert samp.n == 0
        assert np.isnan(samp.sample_mean)
        assert np.isnan(samp.standard_error_of_mean)


class TestPopulationStatistics:

    def test_from_array(self, four_obs):
        pop = PopulationStatistics.from_array(four_obs)
        assert pop.n == 4
        assert pop.population_mean == pytest.approx(5.775, rel=1e-15)
        assert pop.standard_error == pytest.approx(3.0144443932506038, rel=1e-14)

    def test_singleton_allowed(self):
        pop = PopulationStatistics.from_array([2.0])
        assert pop == PopulationStatistics(population_mean=2.0, standard_error=0.0, n=1)

    def test_strict_empty(self):
        with pytest.raises(InsufficientDataError):
            PopulationStatistics.from_array([])

    def test_deterministic(self, rng):
        x = rng.uniform(size=17)
        assert PopulationStatistics.from_array(x) == PopulationStatistics.from_array(x)

    def test_below_sample(self, four_obs):
        pop = PopulationStatistics.from_array(four_obs)
        samp = SampleStatistics.from_array(four_obs)
        assert pop.standard_error < samp.standard_error
        assert pop.population_mean == samp.sample_mean


class TestConstructionContract:

    @pytest.mark.parametrize("cls", [SampleStatistics, PopulationStatistics])
    def test_implements_protocol(self, cls):
        assert isinstance(cls.from_array([1.0, 2.0, 3.0]), GetStatistics)

    def test_kinds(self):
        assert SampleStatistics.kind is Sample
        assert PopulationStatistics.kind is Population
        assert (Sample.ddof, Population.ddof) == (1, 0)
        assert (Sample.min_observations, Population.min_observations) == (2, 1)

    def test_kind_standard_deviation(self):
        assert Sample.standard_deviation([1.0, 2.0, 3.0]) == 1.0
        assert Population.standard_deviation([1.0, 2.0, 3.0]) == pytest.approx(
            0.816496580927726, rel=1e-14
        )

    def test_kind_policy(self):
        with pytest.raises(InsufficientDataError):
            Sample.standard_deviation([1.0])
        with pytest.warns(RuntimeWarning):
            assert np.isnan(Sample.standard_deviation([1.0], policy="permissive"))


class TestKindsDriveComputation:
    """The deviation kind's ddof and min_observations are what the solvers use."""

    def test_ddof_from_kind(self, monkeypatch, four_obs):
        monkeypatch.setattr(Sample, "ddof", 0)
        assert sample_standard_deviation(four_obs) == pytest.approx(
            3.0144443932506038, rel=1e-14
        )

    def test_min_observations_from_kind(self, monkeypatch):
        monkeypatch.setattr(Population, "min_observations", 3)
        with pytest.raises(InsufficientDataError, match="at least 3") as exc:
            population_standard_deviation([1.0, 2.0])
        assert exc.value.required == 3

    def test_label_from_kind(self):
        with pytest.raises(InsufficientDataError, match=Sample.label):
            SampleStatistics.from_array([1.0])


class TestSingleBackendPass:

    def test_from_array_solves_once(self, monkeypatch, four_obs):
        calls = []
        original = CPUDescriptiveBackend.solve

        def counting_solve(self, design, *, compute):
            calls.append(set(compute))
            return original(self, design, compute=compute)

        monkeypatch.setattr(CPUDescriptiveBackend, "solve", counting_solve)
        SampleStatistics.from_array(four_obs)
        PopulationStatistics.from_array(four_obs)
        assert calls == [
            {"mean", "sample_sd"},
            {"mean", "population_sd"},
        ]


class TestWarningLocation:
    """Permissive warnings are attributed to the calling line."""

    def test_from_array(self):
        with pytest.warns(RuntimeWarning) as record:
            SampleStatistics.from_array([1.0], policy="permissive")
        assert [w.filename for w in record] == [__file__]

    def test_population_from_array(self):
        with pytest.warns(RuntimeWarning) as record:
            PopulationStatistics.from_array([], policy="permissive")
        assert len(record) == 2
        assert all(w.filename == __file__ for w in record)

    def test_kind_standard_deviation(self):
        with pytest.warns(RuntimeWarning) as record:
            Sample.standard_deviation([1.0], policy="permissive")
        assert [w.filename for w in record] == [__file__]

    def test_repeated_calls_each_reported(self):
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("default")
            SampleStatistics.from_array([1.0], policy="permissive")
            SampleStatistics.from_array([2.0], policy="permissive")
        assert len(record) == 2
        assert record[0].lineno != record[1].lineno
