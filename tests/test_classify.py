from photon_core.classify import CATEGORY_COLORS, LENSING_FACTOR, classify_fate
from photon_core.constants import critical_impact_parameter
from photon_core.ensemble import build_ensemble
from photon_core.models import EnsembleConfig, FateCategory

B_CRIT = critical_impact_parameter(1.0)


def test_crossed_is_always_trapped():
    for b in (0.1, B_CRIT, 100.0):
        assert classify_fate(True, b, B_CRIT) is FateCategory.TRAPPED


def test_lensed_band():
    assert classify_fate(False, B_CRIT * 1.01, B_CRIT) is FateCategory.LENSED
    assert classify_fate(False, LENSING_FACTOR * B_CRIT, B_CRIT) is FateCategory.UNAFFECTED
    assert classify_fate(False, 20.0, B_CRIT) is FateCategory.UNAFFECTED


def test_lensing_factor_is_tunable():
    assert classify_fate(False, 7.0, B_CRIT, lensing_factor=2.0) is FateCategory.LENSED


def test_colors_cover_every_category():
    assert set(CATEGORY_COLORS) == set(FateCategory)


def test_random_ensemble_categories_follow_fate():
    config = EnsembleConfig(mass=1.0, impact_parameter=4.0, ray_count=40, seed=2024,
                            distribution_mode="planar", impact_mode="random")
    rays = build_ensemble(config)
    for ray in rays:
        if ray.crossed:
            assert ray.category is FateCategory.TRAPPED
        if ray.b >= LENSING_FACTOR * B_CRIT:
            assert ray.category is FateCategory.UNAFFECTED
            assert not ray.crossed
    # the random band straddles b_crit, so both fates show up
    assert any(r.crossed for r in rays)
    assert any(r.escaped for r in rays)
