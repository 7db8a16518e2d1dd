"""Product and service revision DTOs."""

from typing import Any, List, Optional

from pydantic import Field

from .base import WireModel


class Container(WireModel):
    name: str = ""
    image: str = ""
    image_name: str = ""


class RenderVariableKV(WireModel):
    key: str = ""
    value: Any = None
    type: str = ""
    use_global_variable: bool = False


class SvcRevision(WireModel):
    service_name: str = ""
    type: str = ""
    current_revision: int = 0
    next_revision: int = 0
    updatable: bool = False
    deploy_strategy: str = ""
    error: str = ""
    deleted: bool = False
    new: bool = False
    containers: Optional[List[Container]] = None
    update_service_tmpl: bool = False
    variable_yaml: str = ""
    variable_kvs: List[RenderVariableKV] = Field(default_factory=list)


class ProductRevision(WireModel):
    """Revision diff of an environment against its project templates."""

    id: str = ""
    env_name: str = ""
    product_name: str = ""
    # revision before the update
    current_revision: int = 0
    # revision after the update
    next_revision: int = 0
    # whether the product itself changed
    updatable: bool = False
    service_revisions: List[SvcRevision] = Field(default_factory=list, alias="services")
    is_public: bool = Field(default=False, alias="isPublic")

    def groups_updated(self) -> bool:
        """True when any service changed; falls back to the product flag.

        A product without service revisions is never reported as updated.
        """
        if not self.service_revisions:
            return False
        if any(svc.updatable for svc in self.service_revisions):
            return True
        return self.updatable


class SvcOptArgs(WireModel):
    """Arguments of a single service update, never sent on the wire."""

    env_name: str = ""
    product_name: str = ""
    service_name: str = ""
    service_type: str = ""
    service_rev: Optional[SvcRevision] = None
    update_by: str = ""
    update_service_tmpl: bool = False


class PreviewServiceArgs(WireModel):
    product_name: str = ""
    env_name: str = ""
    service_name: str = ""
    update_service_revision: bool = False
    service_modules: List[Container] = Field(default_factory=list)
    variable_kvs: List[RenderVariableKV] = Field(default_factory=list)
