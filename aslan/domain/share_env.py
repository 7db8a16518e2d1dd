"""
Share-env readiness and the sidecar inspection models around it.

Sharing an environment through Istio needs three mesh artifacts: the
namespace injection label, the VirtualServices steering traffic, and the
proxy sidecar in every pod. Enabling is ready once all three exist on top
of healthy workloads; disabling is ready once none of them remain.
"""

from enum import Enum
from typing import List, Union

from pydantic import Field

from .base import WireModel


class ShareEnvOp(str, Enum):
    """Direction of a share-env operation."""

    ENABLE = "enable"
    DISABLE = "disable"


class ShareEnvReadyChecks(WireModel):
    """Snapshot collected from the cluster by the mesh inspector.

    ``workloads_have_k8s_service`` is reported for visibility only and does
    not take part in the readiness decision.
    """

    namespace_has_istio_label: bool = False
    virtual_services_deployed: bool = Field(default=False, alias="virtualservice_deployed")
    pods_have_istio_proxy: bool = False
    workloads_ready: bool = False
    workloads_have_k8s_service: bool = False


def evaluate_share_env_readiness(checks: ShareEnvReadyChecks, op: Union[ShareEnvOp, str]) -> bool:
    """
    Roll the checks up into a single readiness flag.

    Args:
        checks: Snapshot of the cluster checks, never modified
        op: ``enable``, or anything else for the disable direction

    Returns:
        True when the environment reached the state ``op`` asks for
    """
    if not checks.workloads_ready:
        return False

    mesh_artifacts = (
        checks.namespace_has_istio_label,
        checks.virtual_services_deployed,
        checks.pods_have_istio_proxy,
    )
    if op == ShareEnvOp.ENABLE:
        return all(mesh_artifacts)
    # Unknown ops are treated as disable.
    return not any(mesh_artifacts)


class ShareEnvReady(WireModel):
    is_ready: bool = False
    checks: ShareEnvReadyChecks = Field(default_factory=ShareEnvReadyChecks)

    def check_and_set_ready(self, op: Union[ShareEnvOp, str]) -> "ShareEnvReady":
        """Overwrite ``is_ready`` from the current checks and return self."""
        self.is_ready = evaluate_share_env_readiness(self.checks, op)
        return self


class MatchedEnv(WireModel):
    """Environment whose namespace matched a share-env lookup."""

    env_name: str = Field(default="", alias="EnvName")
    namespace: str = Field(default="", alias="Namespace")


# Envoy cluster load assignment, as dumped from a sidecar's admin API.


class EnvoySocketAddress(WireModel):
    protocol: str = ""
    address: str = ""
    port_value: int = 0


class EnvoyAddress(WireModel):
    socket_address: EnvoySocketAddress = Field(default_factory=EnvoySocketAddress)


class EnvoyEndpoint(WireModel):
    address: EnvoyAddress = Field(default_factory=EnvoyAddress)


class EnvoyEndpoints(WireModel):
    endpoint: EnvoyEndpoint = Field(default_factory=EnvoyEndpoint)


class EnvoyLBEndpoints(WireModel):
    lb_endpoints: List[EnvoyEndpoints] = Field(default_factory=list)


class EnvoyClusterConfigLoadAssignment(WireModel):
    cluster_name: str = ""
    endpoints: List[EnvoyLBEndpoints] = Field(default_factory=list)

    def socket_addresses(self) -> List[EnvoySocketAddress]:
        """Flatten every locality into its socket addresses, in order."""
        return [
            lb_endpoint.endpoint.address.socket_address
            for locality in self.endpoints
            for lb_endpoint in locality.lb_endpoints
        ]
