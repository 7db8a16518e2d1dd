from typing import List

from ..domain.environment import Environment, ServiceDetail
from ..domain.workload import StartDevmodeInfo, WorkloadInfo
from ..infrastructure.logging import get_logger
from .http import HttpClient

logger = get_logger(__name__)


class AslanClient(HttpClient):
    """
    Client for the aslan environment endpoints.

    Example:
        client = AslanClient(host="http://zadig.local", token="t0k3n")
        envs = client.list_environments("demo")
    """

    def list_environments(self, project_name: str) -> List[Environment]:
        res = self.get("/environment/environments", params={"projectName": project_name})
        return [Environment.model_validate(env) for env in res or []]

    def get_environment(self, env_name: str, project_name: str) -> Environment:
        res = self.get(
            f"/environment/environments/{env_name}",
            params={"projectName": project_name},
        )
        return Environment.model_validate(res or {})

    def get_service_detail(self, project_name: str, service_name: str, env_name: str) -> ServiceDetail:
        res = self.get(
            f"/environment/environments/{env_name}/services/{service_name}",
            params={"projectName": project_name},
        )
        return ServiceDetail.model_validate(res or {})

    def patch_workload(
        self, project_name: str, env_name: str, service_name: str, dev_image: str
    ) -> WorkloadInfo:
        """Switch a service's workload to dev mode running ``dev_image``."""
        body = StartDevmodeInfo(dev_image=dev_image)
        logger.info(f"Patching {service_name} in {project_name}/{env_name} into dev mode")
        res = self.post(
            f"/environment/environments/{env_name}/services/{service_name}/devmode/patch",
            body=body.to_wire(),
            params={"projectName": project_name},
        )
        return WorkloadInfo.model_validate(res or {})

    def recover_workload(self, project_name: str, env_name: str, service_name: str) -> None:
        """Take a service's workload out of dev mode."""
        logger.info(f"Recovering {service_name} in {project_name}/{env_name} from dev mode")
        self.post(
            f"/environment/environments/{env_name}/services/{service_name}/devmode/recover",
            params={"projectName": project_name},
        )
