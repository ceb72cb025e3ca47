"""Tests for disbursement curve profiles and weight distribution."""

from __future__ import annotations

import math

import pytest

from canteiro.curves import (
    BASE_SHAPES,
    distribute_by_weights,
    get_phase_profile,
    get_weights,
    normalize_weights,
    resample_weights,
)
from canteiro.models.enums import CurveProfile

ALL_PROFILES = list(CurveProfile)


class TestGetWeights:
    def test_uniform_single_month(self) -> None:
        assert get_weights(CurveProfile.UNIFORM, 1) == [1.0]

    @pytest.mark.parametrize("duration", [math.nan, math.inf, -math.inf])
    def test_non_finite_duration_is_one_month(self, duration: float) -> None:
        assert get_weights(CurveProfile.FRONT_LOADED, duration) == [1.0]

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    def test_single_month_for_every_profile(self, profile: CurveProfile) -> None:
        assert get_weights(profile, 1) == [1.0]

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    def test_two_months_positive_and_normalized(self, profile: CurveProfile) -> None:
        weights = get_weights(profile, 2)
        assert len(weights) == 2
        assert all(w > 0 for w in weights)
        assert sum(weights) == pytest.approx(1.0)

    def test_two_month_shapes(self) -> None:
        assert get_weights(CurveProfile.FRONT_LOADED, 2) == [0.65, 0.35]
        assert get_weights(CurveProfile.BACK_LOADED, 2) == [0.35, 0.65]

    def test_three_months_mid_peak(self) -> None:
        assert get_weights(CurveProfile.MID_PEAK, 3) == pytest.approx([0.25, 0.5, 0.25])

    def test_three_months_uniform(self) -> None:
        assert get_weights(CurveProfile.UNIFORM, 3) == pytest.approx([1 / 3] * 3)

    def test_front_loaded_five_months_is_base_shape(self) -> None:
        assert get_weights(CurveProfile.FRONT_LOADED, 5) == pytest.approx(
            [0.35, 0.28, 0.20, 0.12, 0.05]
        )

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    @pytest.mark.parametrize("duration", [4, 7, 12, 30])
    def test_long_durations_normalized(self, profile: CurveProfile, duration: int) -> None:
        weights = get_weights(profile, duration)
        assert len(weights) == duration
        assert sum(weights) == pytest.approx(1.0)

    def test_front_loaded_decreases(self) -> None:
        weights = get_weights(CurveProfile.FRONT_LOADED, 9)
        assert weights == sorted(weights, reverse=True)

    def test_back_loaded_increases(self) -> None:
        weights = get_weights(CurveProfile.BACK_LOADED, 9)
        assert weights == sorted(weights)

    def test_fractional_and_zero_durations(self) -> None:
        assert len(get_weights(CurveProfile.MID_PEAK, 4.9)) == 4
        assert get_weights(CurveProfile.MID_PEAK, 0) == [1.0]


class TestResampling:
    def test_identity_when_lengths_match(self) -> None:
        shape = BASE_SHAPES[CurveProfile.MID_PEAK]
        assert resample_weights(shape, len(shape)) == list(shape)

    def test_linear_interpolation(self) -> None:
        assert resample_weights([1.0, 3.0], 3) == pytest.approx([1.0, 2.0, 3.0])

    def test_single_point_expands_uniformly(self) -> None:
        assert resample_weights([1.0], 4) == pytest.approx([0.25] * 4)

    def test_endpoints_preserved(self) -> None:
        shape = BASE_SHAPES[CurveProfile.BACK_LOADED]
        resampled = resample_weights(shape, 11)
        assert resampled[0] == pytest.approx(shape[0])
        assert resampled[-1] == pytest.approx(shape[-1])


class TestNormalizeWeights:
    def test_scales_to_one(self) -> None:
        assert normalize_weights([1.0, 1.0, 2.0]) == pytest.approx([0.25, 0.25, 0.5])

    def test_zero_sum_falls_back_to_uniform(self) -> None:
        assert normalize_weights([0.0, 0.0, 0.0, 0.0]) == pytest.approx([0.25] * 4)

    def test_non_finite_sum_falls_back_to_uniform(self) -> None:
        assert normalize_weights([math.inf, 1.0]) == pytest.approx([0.5, 0.5])


class TestPhaseProfile:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Infraestrutura e Fundações", CurveProfile.FRONT_LOADED),
            ("Mobilização", CurveProfile.FRONT_LOADED),
            ("Instalação de Canteiro", CurveProfile.FRONT_LOADED),
            ("Supraestrutura (Estrutura)", CurveProfile.MID_PEAK),
            ("Alvenaria e Vedações", CurveProfile.MID_PEAK),
            ("Cobertura e Telhado", CurveProfile.MID_PEAK),
            ("Pintura", CurveProfile.BACK_LOADED),
            ("Esquadrias (Portas e Janelas)", CurveProfile.BACK_LOADED),
            ("Paisagismo e Limpeza Final", CurveProfile.BACK_LOADED),
            ("Instalações Elétricas", CurveProfile.UNIFORM),
            ("Administração de Obra", CurveProfile.UNIFORM),
            ("Algo Desconhecido", CurveProfile.UNIFORM),
        ],
    )
    def test_keyword_matching(self, name: str, expected: CurveProfile) -> None:
        assert get_phase_profile(name) == expected

    def test_case_insensitive(self) -> None:
        assert get_phase_profile("FUNDAÇÃO PROFUNDA") == CurveProfile.FRONT_LOADED

    def test_type_is_part_of_the_text(self) -> None:
        assert get_phase_profile("Etapa 1", "projeto") == CurveProfile.UNIFORM
        assert get_phase_profile("Etapa 1", "entrega") == CurveProfile.BACK_LOADED


class TestDistributeByWeights:
    def test_sum_preserved(self) -> None:
        values = distribute_by_weights(1_000.0, get_weights(CurveProfile.MID_PEAK, 7))
        assert sum(values) == pytest.approx(1_000.0, abs=1e-4)

    def test_remainder_goes_to_last_month(self) -> None:
        values = distribute_by_weights(100.0, [0.3, 0.3, 0.3])
        assert values[:2] == pytest.approx([30.0, 30.0])
        assert values[2] == pytest.approx(40.0)

    def test_non_positive_total_gives_zeros(self) -> None:
        assert distribute_by_weights(0.0, [0.5, 0.5]) == [0.0, 0.0]
        assert distribute_by_weights(-10.0, [0.5, 0.5]) == [0.0, 0.0]

    def test_non_finite_total_gives_zeros(self) -> None:
        assert distribute_by_weights(math.nan, [1.0]) == [0.0]

    def test_empty_weights(self) -> None:
        assert distribute_by_weights(100.0, []) == []

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    @pytest.mark.parametrize("duration", [1, 2, 3, 5, 13])
    def test_sum_preserved_for_every_profile(
        self, profile: CurveProfile, duration: int
    ) -> None:
        total = 123_456.78
        values = distribute_by_weights(total, get_weights(profile, duration))
        assert len(values) == duration
        assert sum(values) == pytest.approx(total, abs=1e-4)
