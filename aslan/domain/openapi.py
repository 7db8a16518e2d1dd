"""OpenAPI request types and their validation rules."""

from typing import ClassVar, List

from pydantic import Field

from .base import WireModel
from .revision import RenderVariableKV
from .validation import Rule, RuleValidator, required
from .workload import WorkloadType


class OpenAPIRequest(WireModel):
    """Request decoded from an OpenAPI call, checked with :meth:`validate`."""

    validator: ClassVar[RuleValidator] = RuleValidator([])

    def validate(self) -> None:  # type: ignore[override]  # shadows the deprecated BaseModel.validate classmethod
        """Raise ``RequestValidationError`` naming the first invalid field."""
        self.validator.validate(self)


class OpenAPIScaleServiceReq(OpenAPIRequest):
    project_key: str = ""
    env_name: str = ""
    workload_name: str = ""
    workload_type: str = ""
    target_replicas: int = 0

    validator: ClassVar[RuleValidator] = RuleValidator(
        [
            required("project_key"),
            required("env_name"),
            required("workload_name"),
            required("workload_type"),
            Rule(
                "workload_type",
                lambda req: req.workload_type in WorkloadType.values(),
                lambda req: f"unsupported workload type: {req.workload_type}",
            ),
            Rule(
                "target_replicas",
                lambda req: req.target_replicas >= 0,
                "target_replicas must be greater than or equal to 0",
            ),
        ]
    )


class YamlServiceWithKV(WireModel):
    service_name: str = ""
    variable_kvs: List[RenderVariableKV] = Field(default_factory=list)


class OpenAPIApplyYamlServiceReq(OpenAPIRequest):
    env_name: str = ""
    service_list: List[YamlServiceWithKV] = Field(default_factory=list)

    validator: ClassVar[RuleValidator] = RuleValidator(
        [
            required("env_name"),
            Rule(
                "service_name",
                lambda req: all(svc.service_name for svc in req.service_list),
                "service_name is required for all services",
            ),
        ]
    )


class OpenAPIDeleteYamlServiceFromEnvReq(OpenAPIRequest):
    env_name: str = ""
    service_names: List[str] = Field(default_factory=list)

    validator: ClassVar[RuleValidator] = RuleValidator([required("env_name")])


class OpenAPIEnvCfgArgs(OpenAPIRequest):
    name: str = ""
    env_name: str = ""
    product_name: str = ""
    service_name: str = ""
    yaml_data: str = ""
    common_env_cfg_type: str = ""
    auto_sync: bool = False

    validator: ClassVar[RuleValidator] = RuleValidator(
        [
            required("name"),
            required("env_name"),
            # the OpenAPI exposes the product as a project
            required("product_name", field="project_name"),
            required("common_env_cfg_type"),
            required("yaml_data"),
        ]
    )
