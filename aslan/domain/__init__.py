"""
Domain layer - aslan wire models, readiness rollup and request validation.

Nothing in here performs I/O.
"""

from .environment import (
    ContainerImage,
    CronJob,
    Environment,
    Ingress,
    IngressInfo,
    Node,
    NodeResp,
    Pod,
    ProductIngressInfo,
    Service,
    ServiceDetail,
    ServicePort,
    Workload,
)
from .exceptions import AslanException, ContainerNotFound, RequestValidationError
from .openapi import (
    OpenAPIApplyYamlServiceReq,
    OpenAPIDeleteYamlServiceFromEnvReq,
    OpenAPIEnvCfgArgs,
    OpenAPIRequest,
    OpenAPIScaleServiceReq,
    YamlServiceWithKV,
)
from .revision import (
    Container,
    PreviewServiceArgs,
    ProductRevision,
    RenderVariableKV,
    SvcOptArgs,
    SvcRevision,
)
from .share_env import (
    EnvoyClusterConfigLoadAssignment,
    MatchedEnv,
    ShareEnvOp,
    ShareEnvReady,
    ShareEnvReadyChecks,
    evaluate_share_env_readiness,
)
from .validation import Rule, RuleValidator, required
from .workload import (
    RestartScaleArgs,
    ScaleArgs,
    StartDevmodeInfo,
    WorkloadInfo,
    WorkloadType,
)

__all__ = [
    # Environment
    "Environment",
    "ServiceDetail",
    "Workload",
    "Pod",
    "ContainerImage",
    "Ingress",
    "IngressInfo",
    "ProductIngressInfo",
    "Service",
    "ServicePort",
    "CronJob",
    "Node",
    "NodeResp",
    # Exceptions
    "AslanException",
    "ContainerNotFound",
    "RequestValidationError",
    # OpenAPI requests
    "OpenAPIRequest",
    "OpenAPIScaleServiceReq",
    "OpenAPIApplyYamlServiceReq",
    "OpenAPIDeleteYamlServiceFromEnvReq",
    "OpenAPIEnvCfgArgs",
    "YamlServiceWithKV",
    # Revisions
    "ProductRevision",
    "SvcRevision",
    "SvcOptArgs",
    "PreviewServiceArgs",
    "Container",
    "RenderVariableKV",
    # Share env
    "ShareEnvOp",
    "ShareEnvReady",
    "ShareEnvReadyChecks",
    "MatchedEnv",
    "EnvoyClusterConfigLoadAssignment",
    "evaluate_share_env_readiness",
    # Validation
    "Rule",
    "RuleValidator",
    "required",
    # Workloads
    "WorkloadType",
    "WorkloadInfo",
    "StartDevmodeInfo",
    "ScaleArgs",
    "RestartScaleArgs",
]
