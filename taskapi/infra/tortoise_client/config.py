"""
Tortoise ORM configuration
"""
from typing import Any, Dict

from ..config import Settings

MODELS_MODULE = "taskapi.infra.tortoise_client.models"


def build_tortoise_config(settings: Settings) -> Dict[str, Any]:
    return {
        "connections": {
            "default": settings.db_url
        },
        "apps": {
            "models": {
                "models": [MODELS_MODULE],
                "default_connection": "default",
            },
        },
    }
