"""Tests for the inversion engine and prediction checks."""

import pytest

from chromaseq.colors import MAX_DISTANCE, hex_to_rgb
from chromaseq.core import check_prediction, invert, invert_hex, invert_parallel
from chromaseq.exceptions import InvalidParameterError, MalformedColorError, UnknownMethodError
from chromaseq.models import RGB, ColorMode, InversionStrategy, SobolMethod
from chromaseq.sequences import generate_color, generate_hex_sequence


@pytest.mark.unit
class TestInvertLiterals:
    """Reference colors recover their indices."""

    def test_invert_first_plastic_color(self, plastic):
        result = invert_hex("#851BE4", plastic, seed=42)
        assert result.found
        assert result.index == 1
        assert result.distance < 0.01

    def test_invert_index_69(self, plastic):
        result = invert_hex("#D4832B", plastic, seed=42)
        assert result.found
        assert result.index == 69

    def test_thread_round_trip(self, plastic):
        """Every color of a hex thread inverts to its position."""
        for i, hex_color in enumerate(generate_hex_sequence(plastic, 5, seed=42), start=1):
            assert invert_hex(hex_color, plastic, seed=42).index == i


@pytest.mark.unit
class TestRoundTrip:
    """generate then invert returns the generating index."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 69, 500])
    def test_plastic(self, plastic, n):
        color = generate_color(plastic, n, seed=42)
        assert invert(color, plastic, seed=42, max_search=1000).index == n

    @pytest.mark.parametrize("n", range(1, 151, 7))
    def test_golden(self, golden, n):
        color = generate_color(golden, n)
        assert invert(color, golden).index == n

    @pytest.mark.parametrize("n", range(1, 151, 7))
    def test_kronecker(self, kronecker, n):
        color = generate_color(kronecker, n, seed=0.125)
        assert invert(color, kronecker, seed=0.125).index == n

    @pytest.mark.parametrize("n,seed", [(50, 123), (1, 0), (7, 0), (20, 0), (99, 5)])
    def test_halton(self, halton, n, seed):
        color = generate_color(halton, n, seed)
        assert invert(color, halton, seed).index == n

    def test_sobol_index_zero(self):
        """Index 0 is a real answer for methods that start at 0."""
        sobol = SobolMethod(mode=ColorMode.RGB)
        result = invert(RGB.black(), sobol)
        assert result.found
        assert result.index == 0

    def test_wrong_seed_finds_shifted_index(self, halton):
        """Seed 3 shifts Halton indices by 3, so index 10 at seed 0 is index 7 at seed 3."""
        color = generate_color(halton, 10, seed=0)
        result = invert(color, halton, seed=3, max_search=200)
        assert result.index == 7


@pytest.mark.unit
class TestStrategies:
    """Test first and nearest strategies."""

    def test_nearest_resolves_one_dimensional_collisions(self, golden):
        """Past a few hundred indices two golden hues can fall within tolerance."""
        color = generate_color(golden, 400)

        first = invert(color, golden, max_search=400)
        nearest = invert(color, golden, max_search=400, strategy=InversionStrategy.NEAREST)

        assert first.found and first.index < 400
        assert nearest.index == 400
        assert nearest.distance == 0.0
        assert nearest.searched == 400

    @pytest.mark.parametrize("n", [500, 1000])
    def test_nearest_recovers_one_dimensional_indices(self, golden, kronecker, n):
        for method in (golden, kronecker):
            color = generate_color(method, n)
            result = invert(color, method, max_search=10000, strategy=InversionStrategy.NEAREST)
            assert result.index == n

    def test_nearest_accepts_string_strategy(self, plastic):
        color = generate_color(plastic, 12, seed=42)
        assert invert(color, plastic, seed=42, max_search=100, strategy="nearest").index == 12

    def test_first_stops_early(self, plastic):
        color = generate_color(plastic, 12, seed=42)
        assert invert(color, plastic, seed=42).searched == 12


@pytest.mark.unit
class TestNotFound:
    """Exhausting the range is data, not an error."""

    def test_unreachable_color(self, plastic):
        """Plastic colors all have lightness 0.5, so white is never produced."""
        result = invert(RGB(r=1.0, g=1.0, b=1.0), plastic, max_search=100)
        assert not result.found
        assert result.index is None
        assert result.distance > 0.01
        assert result.searched == 100

    def test_bound_below_index(self, plastic):
        color = generate_color(plastic, 69, seed=42)
        result = invert(color, plastic, seed=42, max_search=68)
        assert not result.found
        assert result.distance > 0.0

    def test_zero_bound_searches_nothing(self, plastic):
        result = invert(generate_color(plastic, 1), plastic, max_search=0)
        assert not result.found
        assert result.searched == 0
        assert result.distance == MAX_DISTANCE


@pytest.mark.unit
class TestInvertErrors:
    """Test argument validation."""

    def test_malformed_hex(self, plastic):
        with pytest.raises(MalformedColorError):
            invert_hex("#12345", plastic)

    def test_unknown_method(self):
        with pytest.raises(UnknownMethodError):
            invert(RGB.black(), object())

    @pytest.mark.parametrize("tolerance", [0.0, -0.5])
    def test_non_positive_tolerance(self, plastic, tolerance):
        with pytest.raises(InvalidParameterError) as exc_info:
            invert(RGB.black(), plastic, tolerance=tolerance)
        assert exc_info.value.field == "tolerance"

    def test_negative_bound(self, plastic):
        with pytest.raises(InvalidParameterError):
            invert(RGB.black(), plastic, max_search=-1)


@pytest.mark.unit
class TestInvertParallel:
    """Partitioned inversion agrees with the sequential scan."""

    @pytest.mark.parametrize("workers", [1, 2, 4, 7])
    def test_same_index_as_sequential(self, plastic, workers):
        color = hex_to_rgb("#D4832B")
        result = invert_parallel(color, plastic, seed=42, max_search=1000, workers=workers)
        assert result.found
        assert result.index == 69

    def test_lowest_index_wins(self, golden):
        color = generate_color(golden, 400)
        sequential = invert(color, golden, max_search=1000)
        parallel = invert_parallel(color, golden, max_search=1000, workers=4)
        assert parallel.index == sequential.index

    def test_nearest_across_workers(self, golden):
        color = generate_color(golden, 400)
        result = invert_parallel(color, golden, max_search=1000, strategy=InversionStrategy.NEAREST, workers=3)
        assert result.index == 400
        assert result.searched == 1000

    def test_not_found_reports_closest(self, plastic):
        result = invert_parallel(RGB(r=1.0, g=1.0, b=1.0), plastic, max_search=90, workers=3)
        assert not result.found
        assert result.searched == 90
        assert result.distance == invert(RGB(r=1.0, g=1.0, b=1.0), plastic, max_search=90).distance

    def test_more_workers_than_indices(self, plastic):
        color = generate_color(plastic, 2)
        assert invert_parallel(color, plastic, max_search=3, workers=16).index == 2

    def test_invalid_worker_count(self, plastic):
        with pytest.raises(InvalidParameterError):
            invert_parallel(RGB.black(), plastic, workers=0)


@pytest.mark.unit
class TestCheckPrediction:
    """Test predicted-versus-observed comparison."""

    def test_correct_color_matches(self, plastic):
        predicted = generate_hex_sequence(plastic, 1, seed=42, start=1337)[0]
        result = check_prediction(1337, predicted, plastic, seed=42)
        assert result.matches
        assert result.predicted == predicted
        assert result.observed == predicted

    def test_wrong_color_fails(self, plastic):
        result = check_prediction(1337, "#FF0000", plastic, seed=42)
        assert not result.matches
        assert result.distance >= result.tolerance

    def test_accepts_rgb(self, plastic):
        color = generate_color(plastic, 5)
        result = check_prediction(5, color, plastic)
        assert result.matches
        assert result.distance == 0.0

    def test_malformed_observation(self, plastic):
        with pytest.raises(MalformedColorError):
            check_prediction(1, "not-a-color", plastic)

    def test_negative_index(self, plastic):
        with pytest.raises(InvalidParameterError):
            check_prediction(-1, "#000000", plastic)
