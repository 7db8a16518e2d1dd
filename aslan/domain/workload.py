"""Workload DTOs."""

from enum import Enum

from .base import WireModel


class WorkloadType(str, Enum):
    """Kubernetes workload kinds that can be scaled through the OpenAPI."""

    DEPLOYMENT = "Deployment"
    STATEFUL_SET = "StatefulSet"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class RestartScaleArgs(WireModel):
    type: str = ""
    product_name: str = ""
    env_name: str = ""
    name: str = ""
    # deprecated, not read by the server anymore
    service_name: str = ""


class ScaleArgs(WireModel):
    type: str = ""
    product_name: str = ""
    env_name: str = ""
    service_name: str = ""
    name: str = ""
    number: int = 0


class WorkloadInfo(WireModel):
    """Pod picked for dev mode after a workload patch."""

    pod_name: str = ""
    pod_namespace: str = ""


class StartDevmodeInfo(WireModel):
    dev_image: str = ""
