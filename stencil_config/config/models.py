"""Stencil configuration model."""

import copy
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from stencil_config.constants import FIELD_API_HOST


class StencilConfig(BaseModel):
    """Validated configuration of a Stencil theme project.

    The record is open-ended: keys without a declared field are kept as
    extras and written back unchanged. Known keys are exposed as snake_case
    attributes but serialized under their camelCase JSON names. Values are
    not type-checked; only the required keys are enforced, by the manager.

    Attributes:
        normal_store_url: URL of the store the theme is developed against.
        custom_layouts: Custom layout mapping, or a flag on older configs.
        api_host: BigCommerce API host.
        access_token: Stores API access token (secret).
        github_token: GitHub token used for theme downloads (secret).
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    normal_store_url: Any = Field(default=None, alias="normalStoreUrl")
    custom_layouts: Any = Field(default=None, alias="customLayouts")
    api_host: Any = Field(default=None, alias=FIELD_API_HOST)
    access_token: Any = Field(default=None, alias="accessToken")
    github_token: Any = Field(default=None, alias="githubToken")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping of the keys that were supplied.

        Returns:
            Deep copy keyed by JSON field names, extras included.
        """
        data: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                data[field.alias or name] = getattr(self, name)
        data.update(self.model_extra or {})
        return copy.deepcopy(data)
