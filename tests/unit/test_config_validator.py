"""Tests for catalog advisory validation."""

from __future__ import annotations

from ledwall.application.config import (
    CustomCaseConfig,
    ModuleConfig,
    TilingConfiguration,
    validate_config,
)


def _config(**kwargs) -> TilingConfiguration:
    return TilingConfiguration(schema_version="1.0", **kwargs)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_default_config_is_clean(self) -> None:
        """The default configuration should produce no warnings."""
        result = validate_config(_config())

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_case_not_holding_whole_modules(self) -> None:
        """A case that does not hold whole modules should only warn."""
        result = validate_config(
            _config(custom_catalog=[CustomCaseConfig(width=500, height=640)])
        )

        assert result.is_valid
        assert result.exit_code == 2
        assert result.warnings[0].path == "custom_catalog[0]"
        assert "whole" in result.warnings[0].message

    def test_standard_case_not_holding_whole_modules(self) -> None:
        """The standard case should be checked against the module size too."""
        result = validate_config(_config(led_module=ModuleConfig(width=150, height=320)))

        assert any(w.path == "standard_case" for w in result.warnings)

    def test_case_taller_than_row(self) -> None:
        """A custom case taller than the row height should warn."""
        result = validate_config(
            _config(custom_catalog=[CustomCaseConfig(width=640, height=960)])
        )

        assert [w.path for w in result.warnings] == ["custom_catalog[0].height"]
        assert "never used" in result.warnings[0].message

    def test_duplicate_sizes_warn_once_per_repeat(self) -> None:
        """Each repeated custom size should warn once."""
        result = validate_config(
            _config(
                custom_catalog=[
                    CustomCaseConfig(width=640, height=640, catalog_id="A"),
                    CustomCaseConfig(width=320, height=640, catalog_id="B"),
                    CustomCaseConfig(width=640, height=640, catalog_id="C"),
                ]
            )
        )

        assert [w.path for w in result.warnings] == ["custom_catalog[2]"]
        assert "custom_catalog[0]" in result.warnings[0].message

    def test_catalog_id_reused_for_different_size_is_error(self) -> None:
        """A catalog id reused for a different size should be an error."""
        result = validate_config(
            _config(
                custom_catalog=[
                    CustomCaseConfig(width=640, height=640, catalog_id="CP-A"),
                    CustomCaseConfig(width=320, height=640, catalog_id="CP-A"),
                ]
            )
        )

        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].path == "custom_catalog[1].catalog_id"
        assert result.errors[0].value == "CP-A"

    def test_custom_entry_with_standard_size(self) -> None:
        """A custom entry the size of the standard case should warn."""
        result = validate_config(
            _config(custom_catalog=[CustomCaseConfig(width=1120, height=640)])
        )

        assert any("standard" in w.message for w in result.warnings)
