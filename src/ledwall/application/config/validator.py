"""Advisory validation of tiling configurations.

Pydantic already enforces types and ranges. The checks here look at the
catalog as a whole: whether cases hold whole LED modules, whether entries
can ever be used by the row builder, and duplicate references.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from ledwall.application.config.schema import TilingConfiguration


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "custom_catalog[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self


def validate_config(config: TilingConfiguration) -> ValidationResult:
    """Perform full validation of a tiling configuration.

    Args:
        config: A TilingConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    module = config.led_module
    standard = config.standard_case

    if standard.width % module.width or standard.height % module.height:
        result.add_warning(
            path="standard_case",
            message=(
                f"Standard case {standard.width}x{standard.height} mm does not hold "
                f"whole {module.width}x{module.height} mm modules"
            ),
            suggestion="Use a module size that divides the standard case",
        )

    ids = Counter(case.catalog_id for case in config.custom_catalog if case.catalog_id)
    seen_ids: dict[str, tuple[int, int]] = {}
    first_by_size: dict[tuple[int, int], int] = {}

    for index, case in enumerate(config.custom_catalog):
        path = f"custom_catalog[{index}]"
        size = (case.width, case.height)

        if case.catalog_id and ids[case.catalog_id] > 1:
            first = seen_ids.setdefault(case.catalog_id, size)
            if first != size:
                result.add_error(
                    path=f"{path}.catalog_id",
                    message=f"Catalog id '{case.catalog_id}' is used for different sizes",
                    value=case.catalog_id,
                )

        first = first_by_size.setdefault(size, index)
        if first != index:
            result.add_warning(
                path=path,
                message=(
                    f"Case size {case.width}x{case.height} mm duplicates "
                    f"custom_catalog[{first}]"
                ),
                suggestion="Only the first entry is used for catalog matching",
            )

        if case.height > standard.height:
            result.add_warning(
                path=f"{path}.height",
                message=(
                    f"Case height {case.height} mm exceeds the row height "
                    f"{standard.height} mm and is never used"
                ),
            )

        if case.width % module.width or case.height % module.height:
            result.add_warning(
                path=path,
                message=(
                    f"Case {case.width}x{case.height} mm does not hold whole "
                    f"{module.width}x{module.height} mm modules"
                ),
            )

        if size == (standard.width, standard.height):
            result.add_warning(
                path=path,
                message="Custom case has the standard size and is tagged as standard",
            )

    return result

