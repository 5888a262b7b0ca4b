"""Configuration model for a container-selector invocation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core.constants import DOCKER_BINARY


class SelectorConfig(BaseModel):
    """Options parsed once from the command line and passed through the pipeline."""

    model_config = ConfigDict(frozen=True)

    command: Optional[str] = None
    no_prompt: bool = False
    container_filter: Optional[str] = None
    docker_binary: str = DOCKER_BINARY
