"""FastAPI dependency injection for layout services."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from ledwall.application import ComputeLayoutCommand
from ledwall.application.config import (
    TilingConfiguration,
    config_to_panels,
    default_config,
    load_config,
)

logger = logging.getLogger(__name__)

# Environment variable naming a JSON configuration file for the server
CONFIG_ENV_VAR = "LEDWALL_CONFIG"


@lru_cache(maxsize=1)
def get_configuration() -> TilingConfiguration:
    """Get the cached server configuration.

    Loaded from the file named by ``LEDWALL_CONFIG`` when set, otherwise
    the built-in defaults.
    """
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return default_config()
    logger.info("Loading server configuration from %s", path)
    return load_config(Path(path))


def get_compute_command(
    config: Annotated[TilingConfiguration, Depends(get_configuration)],
) -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand(panels=config_to_panels(config))


# Type aliases for cleaner endpoint signatures
ConfigurationDep = Annotated[TilingConfiguration, Depends(get_configuration)]
ComputeCommandDep = Annotated[ComputeLayoutCommand, Depends(get_compute_command)]
