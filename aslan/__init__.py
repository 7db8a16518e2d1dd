"""
aslan - environment DTOs, share-env readiness and a REST client for the
aslan deployment service.
"""

__version__ = "0.1.0"

from .client import AslanClient, HttpClient
from .domain import (
    Environment,
    OpenAPIApplyYamlServiceReq,
    OpenAPIDeleteYamlServiceFromEnvReq,
    OpenAPIEnvCfgArgs,
    OpenAPIScaleServiceReq,
    RequestValidationError,
    ServiceDetail,
    ShareEnvOp,
    ShareEnvReady,
    ShareEnvReadyChecks,
    WorkloadInfo,
    evaluate_share_env_readiness,
)
from .infrastructure import ClientConfig, get_logger

__all__ = [
    "AslanClient",
    "HttpClient",
    "ClientConfig",
    "get_logger",
    "Environment",
    "ServiceDetail",
    "WorkloadInfo",
    "ShareEnvOp",
    "ShareEnvReady",
    "ShareEnvReadyChecks",
    "evaluate_share_env_readiness",
    "OpenAPIScaleServiceReq",
    "OpenAPIApplyYamlServiceReq",
    "OpenAPIDeleteYamlServiceFromEnvReq",
    "OpenAPIEnvCfgArgs",
    "RequestValidationError",
]
