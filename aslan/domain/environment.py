"""Environment and service detail DTOs returned by aslan."""

from typing import Dict, List

from pydantic import Field

from .base import WireModel


class Environment(WireModel):
    env_name: str = ""
    project_name: str = Field(default="", alias="projectName")
    namespace: str = ""
    cluster_id: str = ""
    registry_id: str = ""
    alias: str = ""
    production: bool = False
    status: str = ""
    update_by: str = ""
    update_time: int = 0


class ContainerImage(WireModel):
    name: str = ""
    image: str = ""


class Pod(WireModel):
    name: str = ""
    status: str = ""
    ready: bool = False
    ip: str = ""
    host_ip: str = ""


class Workload(WireModel):
    name: str = ""
    type: str = ""
    replicas: int = 0
    images: List[ContainerImage] = Field(default_factory=list)
    pods: List[Pod] = Field(default_factory=list)


class IngressBackend(WireModel):
    service_name: str = ""
    service_port: str = ""


class IngressHostInfo(WireModel):
    host: str = ""
    backends: List[IngressBackend] = Field(default_factory=list)


class Ingress(WireModel):
    name: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    host_info: List[IngressHostInfo] = Field(default_factory=list)


class IngressInfo(WireModel):
    host_info: List[IngressHostInfo] = Field(default_factory=list)
    service_name: str = ""


class ProductIngressInfo(WireModel):
    ingress_infos: List[IngressInfo] = Field(default_factory=list)
    env_name: str = ""


class ServicePort(WireModel):
    name: str = ""
    protocol: str = ""
    port: int = 0
    target_port: int = 0
    node_port: int = 0


class Service(WireModel):
    name: str = Field(default="", alias="service_name")
    type: str = ""
    cluster_ip: str = ""
    ports: List[ServicePort] = Field(default_factory=list)


class CronJob(WireModel):
    name: str = ""
    schedule: str = ""
    suspend: bool = False
    images: List[ContainerImage] = Field(default_factory=list)


class ServiceDetail(WireModel):
    """Detail page of one service inside an environment."""

    service_name: str = ""
    scales: List[Workload] = Field(default_factory=list)
    ingress: List[Ingress] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list, alias="service_endpoints")
    cron_jobs: List[CronJob] = Field(default_factory=list)
    namespace: str = ""
    env_name: str = ""
    product_name: str = ""
    group_name: str = ""

    def images(self) -> List[str]:
        """Images of every scaled workload, in response order."""
        return [image.image for workload in self.scales for image in workload.images]


class Node(WireModel):
    ip: str = ""
    status: str = ""
    labels: List[str] = Field(default_factory=list)
    cpu: str = ""
    memory: str = ""


class NodeResp(WireModel):
    nodes: List[Node] = Field(default_factory=list, alias="data")
    labels: List[str] = Field(default_factory=list)
