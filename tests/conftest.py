"""Shared pytest fixtures and markers for all tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep bombergen environment overrides from leaking into tests."""
    monkeypatch.delenv("BOMBERGEN_OUT_OF_RANGE", raising=False)
    monkeypatch.delenv("BOMBERGEN_LOG_LEVEL", raising=False)


@pytest.fixture
def generator():
    """Provide a generator with default (passthrough) configuration."""
    from bombergen.config import GeneratorConfig
    from bombergen.generation.generator import LevelBlueprintGenerator
    return LevelBlueprintGenerator(GeneratorConfig())


@pytest.fixture
def clamping_generator():
    """Provide a generator that clamps out-of-range Story levels."""
    from bombergen.config import GeneratorConfig, OutOfRangePolicy
    from bombergen.generation.generator import LevelBlueprintGenerator
    return LevelBlueprintGenerator(GeneratorConfig(out_of_range=OutOfRangePolicy.CLAMP))
