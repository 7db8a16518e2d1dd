"""Tests for the share-env readiness rollup."""

import itertools

import pytest

from aslan.domain.share_env import (
    EnvoyClusterConfigLoadAssignment,
    MatchedEnv,
    ShareEnvOp,
    ShareEnvReady,
    ShareEnvReadyChecks,
    evaluate_share_env_readiness,
)


def make_checks(label, vs, proxy, ready, svc) -> ShareEnvReadyChecks:
    return ShareEnvReadyChecks(
        namespace_has_istio_label=label,
        virtual_services_deployed=vs,
        pods_have_istio_proxy=proxy,
        workloads_ready=ready,
        workloads_have_k8s_service=svc,
    )


ALL_MESH_FLAGS = list(itertools.product([False, True], repeat=3))


# =============================================================================
# Workload readiness gate
# =============================================================================


class TestWorkloadsReadyGate:
    @pytest.mark.parametrize("op", [ShareEnvOp.ENABLE, ShareEnvOp.DISABLE, "bogus"])
    @pytest.mark.parametrize("label,vs,proxy", ALL_MESH_FLAGS)
    @pytest.mark.parametrize("svc", [False, True])
    def test_never_ready_when_workloads_not_ready(self, op, label, vs, proxy, svc):
        checks = make_checks(label, vs, proxy, False, svc)
        assert evaluate_share_env_readiness(checks, op) is False

    def test_scenario_a_everything_false_enable(self):
        result = ShareEnvReady(checks=make_checks(False, False, False, False, False))
        result.check_and_set_ready(ShareEnvOp.ENABLE)
        assert result.is_ready is False

    def test_gate_overrides_previous_ready_value(self):
        result = ShareEnvReady(is_ready=True, checks=make_checks(True, True, True, False, True))
        result.check_and_set_ready(ShareEnvOp.ENABLE)
        assert result.is_ready is False


# =============================================================================
# Enable
# =============================================================================


class TestEnable:
    @pytest.mark.parametrize("label,vs,proxy", ALL_MESH_FLAGS)
    def test_ready_iff_all_mesh_artifacts_present(self, label, vs, proxy):
        checks = make_checks(label, vs, proxy, True, False)
        expected = label and vs and proxy
        assert evaluate_share_env_readiness(checks, ShareEnvOp.ENABLE) is expected

    @pytest.mark.parametrize("label,vs,proxy", ALL_MESH_FLAGS)
    def test_k8s_service_check_does_not_matter(self, label, vs, proxy):
        without = evaluate_share_env_readiness(make_checks(label, vs, proxy, True, False), "enable")
        with_svc = evaluate_share_env_readiness(make_checks(label, vs, proxy, True, True), "enable")
        assert without is with_svc

    def test_scenario_b(self):
        result = ShareEnvReady(checks=make_checks(True, True, True, True, False))
        result.check_and_set_ready(ShareEnvOp.ENABLE)
        assert result.is_ready is True

    def test_scenario_c_missing_label(self):
        result = ShareEnvReady(checks=make_checks(False, True, True, True, True))
        result.check_and_set_ready(ShareEnvOp.ENABLE)
        assert result.is_ready is False

    def test_plain_string_op(self):
        checks = make_checks(True, True, True, True, True)
        assert evaluate_share_env_readiness(checks, "enable") is True


# =============================================================================
# Disable and unknown ops
# =============================================================================


class TestDisable:
    @pytest.mark.parametrize("label,vs,proxy", ALL_MESH_FLAGS)
    def test_ready_iff_no_mesh_artifact_left(self, label, vs, proxy):
        checks = make_checks(label, vs, proxy, True, True)
        expected = not label and not vs and not proxy
        assert evaluate_share_env_readiness(checks, ShareEnvOp.DISABLE) is expected

    def test_scenario_d_clean_teardown(self):
        result = ShareEnvReady(checks=make_checks(False, False, False, True, True))
        result.check_and_set_ready(ShareEnvOp.DISABLE)
        assert result.is_ready is True

    def test_scenario_e_leftover_label(self):
        result = ShareEnvReady(checks=make_checks(True, False, False, True, False))
        result.check_and_set_ready(ShareEnvOp.DISABLE)
        assert result.is_ready is False

    @pytest.mark.parametrize("op", ["", "ENABLE", "pause"])
    @pytest.mark.parametrize("label,vs,proxy", ALL_MESH_FLAGS)
    def test_unknown_op_behaves_like_disable(self, op, label, vs, proxy):
        checks = make_checks(label, vs, proxy, True, False)
        assert evaluate_share_env_readiness(checks, op) is evaluate_share_env_readiness(
            checks, ShareEnvOp.DISABLE
        )


# =============================================================================
# Model behaviour
# =============================================================================


class TestShareEnvReadyModel:
    def test_checks_are_not_mutated(self):
        checks = make_checks(True, False, True, True, False)
        before = checks.model_dump()
        ShareEnvReady(checks=checks).check_and_set_ready(ShareEnvOp.ENABLE)
        assert checks.model_dump() == before

    def test_idempotent(self):
        result = ShareEnvReady(checks=make_checks(True, True, True, True, True))
        assert result.check_and_set_ready("enable").is_ready is True
        assert result.check_and_set_ready("enable").is_ready is True

    def test_wire_keys(self):
        result = ShareEnvReady(checks=make_checks(True, True, False, True, False))
        result.check_and_set_ready(ShareEnvOp.ENABLE)
        assert result.to_wire() == {
            "is_ready": False,
            "checks": {
                "namespace_has_istio_label": True,
                "virtualservice_deployed": True,
                "pods_have_istio_proxy": False,
                "workloads_ready": True,
                "workloads_have_k8s_service": False,
            },
        }

    def test_parse_from_wire(self):
        result = ShareEnvReady.model_validate(
            {"is_ready": False, "checks": {"virtualservice_deployed": True, "workloads_ready": True}}
        )
        assert result.checks.virtual_services_deployed is True
        assert result.checks.namespace_has_istio_label is False

    def test_op_values(self):
        assert ShareEnvOp("enable") is ShareEnvOp.ENABLE
        assert ShareEnvOp("disable") is ShareEnvOp.DISABLE


class TestMatchedEnv:
    def test_wire_keys(self):
        env = MatchedEnv(env_name="dev", namespace="demo-env-dev")
        assert env.to_wire() == {"EnvName": "dev", "Namespace": "demo-env-dev"}


class TestEnvoyLoadAssignment:
    def test_socket_addresses_flattened_in_order(self):
        assignment = EnvoyClusterConfigLoadAssignment.model_validate(
            {
                "cluster_name": "outbound|80||svc.demo.svc.cluster.local",
                "endpoints": [
                    {
                        "lb_endpoints": [
                            {"endpoint": {"address": {"socket_address": {
                                "protocol": "TCP", "address": "10.0.0.1", "port_value": 8080}}}},
                            {"endpoint": {"address": {"socket_address": {
                                "protocol": "TCP", "address": "10.0.0.2", "port_value": 8080}}}},
                        ]
                    },
                    {
                        "lb_endpoints": [
                            {"endpoint": {"address": {"socket_address": {
                                "protocol": "TCP", "address": "10.0.1.1", "port_value": 9090}}}},
                        ]
                    },
                ],
            }
        )
        addresses = assignment.socket_addresses()
        assert [(a.address, a.port_value) for a in addresses] == [
            ("10.0.0.1", 8080),
            ("10.0.0.2", 8080),
            ("10.0.1.1", 9090),
        ]

    def test_empty_assignment(self):
        assert EnvoyClusterConfigLoadAssignment().socket_addresses() == []


class TestNullFields:
    def test_null_checks_object(self):
        result = ShareEnvReady.model_validate({"is_ready": None, "checks": None})
        assert result.is_ready is False
        assert result.checks == ShareEnvReadyChecks()
        assert result.check_and_set_ready(ShareEnvOp.ENABLE).is_ready is False

    def test_null_endpoints(self):
        assignment = EnvoyClusterConfigLoadAssignment.model_validate(
            {"cluster_name": "outbound|80||svc", "endpoints": [{"lb_endpoints": None}]}
        )
        assert assignment.socket_addresses() == []

    def test_missing_nested_address(self):
        assignment = EnvoyClusterConfigLoadAssignment.model_validate(
            {"endpoints": [{"lb_endpoints": [{"endpoint": {"address": None}}]}]}
        )
        assert assignment.socket_addresses()[0].address == ""
