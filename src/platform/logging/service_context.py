"""
Service context for log lines.

Identifies the process emitting a log record so that logs from several
replicas can be told apart once aggregated.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'catalog')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    # Container hostnames are unique per replica; fall back to the PID locally
    instance = os.getenv('HOSTNAME') or f'{socket.gethostname()}-{os.getpid()}'
    return f'{service_name}@{deploy_env}:{instance[:12]}'
