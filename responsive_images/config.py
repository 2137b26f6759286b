"""
Loading of responsive image set configuration from YAML.

A configuration file looks like::

    default_method: SetWidth
    default_arguments: [800, 600]
    sets:
      MyResponsiveImageSet:
        method: CroppedImage
        arguments:
          "(min-width: 200px)": [200, 100]
          "(min-width: 800px)": [200, 400]
        default_arguments: [200, 400]
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from responsive_images.models import ResponsiveImagesConfig
from responsive_images.utils.render_logger import get_logger


CONFIG_ENV_VAR = "RESPONSIVE_IMAGES_CONFIG"


def config_from_dict(data: Optional[Dict[str, Any]]) -> ResponsiveImagesConfig:
    """
    Build a configuration object from an in-memory mapping.

    Args:
        data: Mapping with the top-level configuration keys, or None.

    Returns:
        ResponsiveImagesConfig (empty sets if data is empty).
    """
    if not data:
        return ResponsiveImagesConfig()

    values = {key: value for key, value in data.items() if value is not None}
    return ResponsiveImagesConfig.model_validate(values)


def load_config(path: Optional[Union[str, Path]] = None) -> ResponsiveImagesConfig:
    """
    Load responsive image set configuration from a YAML file.

    Args:
        path: Path to the YAML file. Defaults to the RESPONSIVE_IMAGES_CONFIG
            environment variable.

    Returns:
        ResponsiveImagesConfig. A missing file gives an empty configuration.
    """
    logger = get_logger()

    if path is None:
        load_dotenv()
        path = os.getenv(CONFIG_ENV_VAR)

    if not path:
        logger.log_message("No responsive image configuration given, using defaults")
        return ResponsiveImagesConfig()

    config_path = Path(path)
    if not config_path.exists():
        logger.log_message(f"Configuration file not found: {config_path}, using defaults")
        return ResponsiveImagesConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    config = config_from_dict(data)
    logger.log_message(f"Loaded {len(config.sets)} responsive sets from {config_path}")
    return config
