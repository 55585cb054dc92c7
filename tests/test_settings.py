"""
Test suite for environment-driven tolerance defaults.
"""
import sys

import pytest
from pydantic import ValidationError

from bounding_box import BoundingBox, ToleranceSettings, get_settings


class TestToleranceSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BOUNDING_BOX_EPSILON", raising=False)
        monkeypatch.delenv("BOUNDING_BOX_MAX_ULPS", raising=False)
        settings = ToleranceSettings()
        assert settings.EPSILON == sys.float_info.epsilon
        assert settings.MAX_ULPS == 4

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BOUNDING_BOX_EPSILON", "1e-3")
        monkeypatch.setenv("BOUNDING_BOX_MAX_ULPS", "16")
        settings = get_settings()
        assert settings.EPSILON == 1e-3
        assert settings.MAX_ULPS == 16

    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_rejects_negative_values(self, monkeypatch):
        monkeypatch.setenv("BOUNDING_BOX_EPSILON", "-1")
        with pytest.raises(ValidationError):
            ToleranceSettings()

    def test_predicates_fall_back_to_settings(self, monkeypatch, unit_box):
        point = (1.0001, 1.0)
        monkeypatch.delenv("BOUNDING_BOX_EPSILON", raising=False)
        assert not unit_box.approx_contains_point(point)

        monkeypatch.setenv("BOUNDING_BOX_EPSILON", "1e-3")
        get_settings.cache_clear()
        assert unit_box.approx_contains_point(point)
        assert unit_box.approx_equal(BoundingBox(0.0, 1.0001, 0.0, 1.0))
        # explicit arguments win over the environment
        assert not unit_box.approx_contains_point(point, epsilon=1e-6)
