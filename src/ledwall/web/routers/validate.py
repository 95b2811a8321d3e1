"""Configuration validation endpoints."""

from fastapi import APIRouter

from ledwall.application.config import ConfigError, load_config_from_dict, validate_config
from ledwall.web.schemas.requests import ConfigValidateRequest
from ledwall.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a LED wall configuration.

    Schema errors are returned as ``is_valid=false`` with one entry per
    failing field; catalog advisories are returned as warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": detail["message"], "path": detail["path"]}
                for detail in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
