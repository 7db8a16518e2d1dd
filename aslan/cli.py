#!/usr/bin/env python3
"""
aslan-env - command line access to the aslan environment endpoints
"""
import argparse
import json
import sys
from typing import Any, List, Optional

import requests
import uvicorn
from pydantic import ValidationError

from .client import AslanClient
from .infrastructure.config import ClientConfig
from .infrastructure.logging import configure_logging


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def list_environments(client: AslanClient, project: str) -> int:
    envs = client.list_environments(project)
    _print_json([env.to_wire() for env in envs])
    return 0


def get_environment(client: AslanClient, env_name: str, project: str) -> int:
    _print_json(client.get_environment(env_name, project).to_wire())
    return 0


def get_service_detail(client: AslanClient, env_name: str, service_name: str, project: str) -> int:
    _print_json(client.get_service_detail(project, service_name, env_name).to_wire())
    return 0


def devmode_patch(client: AslanClient, env_name: str, service_name: str, project: str, image: str) -> int:
    _print_json(client.patch_workload(project, env_name, service_name, image).to_wire())
    return 0


def devmode_recover(client: AslanClient, env_name: str, service_name: str, project: str) -> int:
    client.recover_workload(project, env_name, service_name)
    print(f"Recovered {service_name} in {project}/{env_name}")
    return 0


def serve(config: ClientConfig, host: str, port: Optional[int]) -> int:
    uvicorn.run(
        "aslan.server.app:create_app",
        factory=True,
        host=host,
        port=port or config.port,
        log_level=config.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aslan-env',
        description='Aslan environment CLI'
    )
    parser.add_argument('--host', help='aslan host URL (or set ASLAN_HOST)')
    parser.add_argument('--token', help='aslan API token (or set ASLAN_TOKEN)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List environments of a project')
    list_parser.add_argument('--project', required=True, help='Project name')

    get_parser = subparsers.add_parser('get', help='Show one environment')
    get_parser.add_argument('env_name', help='Environment name')
    get_parser.add_argument('--project', required=True, help='Project name')

    service_parser = subparsers.add_parser('service', help='Show a service inside an environment')
    service_parser.add_argument('env_name', help='Environment name')
    service_parser.add_argument('service_name', help='Service name')
    service_parser.add_argument('--project', required=True, help='Project name')

    patch_parser = subparsers.add_parser('devmode-patch', help='Start dev mode for a service workload')
    patch_parser.add_argument('env_name', help='Environment name')
    patch_parser.add_argument('service_name', help='Service name')
    patch_parser.add_argument('--project', required=True, help='Project name')
    patch_parser.add_argument('--image', required=True, help='Dev image to run')

    recover_parser = subparsers.add_parser('devmode-recover', help='Stop dev mode for a service workload')
    recover_parser.add_argument('env_name', help='Environment name')
    recover_parser.add_argument('service_name', help='Service name')
    recover_parser.add_argument('--project', required=True, help='Project name')

    serve_parser = subparsers.add_parser('serve', help='Run the readiness/validation HTTP server')
    serve_parser.add_argument('--bind', default='0.0.0.0', help='Interface to bind (default: 0.0.0.0)')
    serve_parser.add_argument('--port', type=int, help='Port (or set ASLAN_PORT)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        return 1

    config = ClientConfig.from_env()
    config = config.with_overrides(
        host=args.host or config.host,
        token=args.token or config.token,
    )
    configure_logging(config.log_level, config.log_format)

    if args.command == 'serve':
        return serve(config, args.bind, args.port)

    if not config.host:
        print("Error: host not specified. Set ASLAN_HOST env var or use --host flag", file=sys.stderr)
        return 1

    client = AslanClient.from_config(config)
    try:
        if args.command == 'list':
            return list_environments(client, args.project)
        if args.command == 'get':
            return get_environment(client, args.env_name, args.project)
        if args.command == 'service':
            return get_service_detail(client, args.env_name, args.service_name, args.project)
        if args.command == 'devmode-patch':
            return devmode_patch(client, args.env_name, args.service_name, args.project, args.image)
        if args.command == 'devmode-recover':
            return devmode_recover(client, args.env_name, args.service_name, args.project)
    except (requests.RequestException, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
