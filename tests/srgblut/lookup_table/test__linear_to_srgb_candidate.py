import pytest
import torch

from srgblut.color import srgb_linear_to_srgb
from srgblut.lookup_table import LinearToSrgbTable, linear_to_srgb_candidate
from srgblut.lookup_table._linear_to_srgb_candidate import (
    _bucket_extrema,
    _encoded_samples,
    _representatives,
)


class TestLinearToSrgbCandidate:
    def test_shift_zero_always_accepted(self):
        """One sample per bucket leaves only 8-bit quantization error."""
        candidate = linear_to_srgb_candidate(0, 0)
        assert isinstance(candidate, LinearToSrgbTable)
        assert candidate.table.shape == (65536,)
        assert candidate.max_error <= 0.5 / 255 + 1e-12
        assert candidate.mse <= (0.5 / 255) ** 2 + 1e-12

    def test_shift_zero_is_nearest_code(self):
        candidate = linear_to_srgb_candidate(0, 0)
        srgb = _encoded_samples()
        expected = torch.round(srgb * 255).to(torch.uint8)
        torch.testing.assert_close(candidate.table, expected)

    def test_table_dtype(self):
        candidate = linear_to_srgb_candidate(0, 0)
        assert candidate.table.dtype == torch.uint8

    def test_nominal_length(self):
        candidate = linear_to_srgb_candidate(4, 0, tolerance=1 / 64)
        assert candidate.table.numel() == 2 ** 12

    def test_table_grows_with_addend(self):
        """The last sample indexes one past the nominal length."""
        candidate = linear_to_srgb_candidate(4, 8, tolerance=1 / 64)
        assert candidate.table.numel() == 2 ** 12 + 1

    def test_fields(self):
        candidate = linear_to_srgb_candidate(5, 17, tolerance=1 / 64)
        assert candidate.shift == 5
        assert candidate.addend == 17
        assert 0 < candidate.max_error <= 1 / 64
        assert candidate.mse <= candidate.max_error**2

    def test_rejected(self):
        """A tolerance tighter than the bucket spread rejects the candidate."""
        assert linear_to_srgb_candidate(5, 0, tolerance=1e-4) is None

    @pytest.mark.parametrize("shift", [-1, 17])
    def test_invalid_shift(self, shift):
        with pytest.raises(ValueError, match="shift"):
            linear_to_srgb_candidate(shift, 0)

    @pytest.mark.parametrize("shift, addend", [(0, 1), (3, 8), (5, -1)])
    def test_invalid_addend(self, shift, addend):
        with pytest.raises(ValueError, match="addend"):
            linear_to_srgb_candidate(shift, addend)

    def test_invalid_tolerance(self):
        with pytest.raises(ValueError, match="tolerance"):
            linear_to_srgb_candidate(0, 0, tolerance=-1.0)


class TestBucketExtrema:
    @pytest.mark.parametrize("shift, addend", [(0, 0), (3, 5), (5, 0), (5, 31)])
    def test_buckets_are_ordered(self, shift, addend):
        """Each bucket's range lies entirely below the next one."""
        mins, maxs = _bucket_extrema(_encoded_samples(), shift, addend)
        assert (mins <= maxs).all()
        assert (maxs[:-1] <= mins[1:]).all()

    def test_matches_explicit_grouping(self):
        srgb = _encoded_samples()
        mins, maxs = _bucket_extrema(srgb, 5, 7)
        index = (torch.arange(65536) + 7) >> 5
        for i in [0, 1, 100, 2047, 2048]:
            bucket = srgb[index == i]
            assert mins[i].item() == bucket.min().item()
            assert maxs[i].item() == bucket.max().item()

    def test_bucket_count(self):
        mins, _ = _bucket_extrema(_encoded_samples(), 5, 0)
        assert mins.numel() == 2048
        mins, _ = _bucket_extrema(_encoded_samples(), 5, 1)
        assert mins.numel() == 2049

    def test_small_domain(self):
        srgb = srgb_linear_to_srgb(torch.linspace(0, 1, 8, dtype=torch.float64))
        mins, maxs = _bucket_extrema(srgb, 1, 1)
        torch.testing.assert_close(mins, srgb[[0, 1, 3, 5, 7]])
        torch.testing.assert_close(maxs, srgb[[0, 2, 4, 6, 7]])


class TestRepresentatives:
    def test_exact_codes(self):
        values = torch.tensor([0.0, 10 / 255, 1.0], dtype=torch.float64)
        codes, error = _representatives(values, values)
        assert codes.tolist() == [0, 10, 255]
        assert error.tolist() == [0.0, 0.0, 0.0]

    def test_centers_between_extremes(self):
        mins = torch.tensor([100 / 255], dtype=torch.float64)
        maxs = torch.tensor([102 / 255], dtype=torch.float64)
        codes, error = _representatives(mins, maxs)
        assert codes.tolist() == [101]
        assert error.item() == pytest.approx(1 / 255)

    def test_clamped_to_8_bits(self):
        mins = torch.tensor([0.0, 254.9 / 255], dtype=torch.float64)
        maxs = torch.tensor([0.1 / 255, 1.0], dtype=torch.float64)
        codes, _ = _representatives(mins, maxs)
        assert codes.tolist() == [0, 255]
