"""Pytest configuration and shared fixtures for LED wall tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ledwall.application import ComputeLayoutCommand
from ledwall.domain import (
    CaseCatalog,
    CaseSpec,
    LayoutBuilder,
    ModuleSpec,
    OrientationSelector,
    TilingConfig,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Engine configurations
# =============================================================================


@pytest.fixture
def default_config() -> TilingConfig:
    """Built-in configuration: 1120x640 standard case and default catalog."""
    return TilingConfig()


@pytest.fixture
def standard_only_config() -> TilingConfig:
    """Configuration with the standard case and no custom catalog."""
    return TilingConfig(catalog=CaseCatalog(standard=CaseSpec.standard(), custom=()))


@pytest.fixture
def small_catalog_config() -> TilingConfig:
    """Standard case plus one full-height and one half-height custom case."""
    return TilingConfig.for_module(
        ModuleSpec(160, 320),
        catalog=CaseCatalog(
            standard=CaseSpec.standard(),
            custom=(
                CaseSpec(width=640, height=640, catalog_id="CP-640x640"),
                CaseSpec(width=640, height=320, catalog_id="CP-640x320"),
            ),
        ),
    )


# =============================================================================
# Shared services
# =============================================================================


@pytest.fixture
def builder(default_config: TilingConfig) -> LayoutBuilder:
    return LayoutBuilder(default_config)


@pytest.fixture
def selector(default_config: TilingConfig) -> OrientationSelector:
    return OrientationSelector(default_config)


@pytest.fixture
def compute_command() -> ComputeLayoutCommand:
    """ComputeLayoutCommand with the built-in LED panels."""
    return ComputeLayoutCommand()


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
