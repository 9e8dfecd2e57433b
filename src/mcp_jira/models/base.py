"""
Base model for Jira API response projections.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for the narrowed shapes returned to MCP clients.

    Subclasses build themselves from raw API payloads with
    :meth:`from_api_response` and serialize with :meth:`to_simplified_dict`.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The response data from the Jira API
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a dictionary for the tool response.

        Returns:
            The model as a dictionary using the API-facing (alias) keys
        """
        return self.model_dump(by_alias=True)
