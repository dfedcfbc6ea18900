"""Kubernetes client wrapper."""

import json
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..errors import ClusterConnectionError, KubectlError
from ..model.kubernetes import K8sResource, ResourceKind
from ..utils.logger import get_logger
from .provider import ResourceProvider

logger = get_logger(__name__)


class K8sClient(ResourceProvider):
    """Wrapper for kubectl commands."""

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        namespace: Optional[str] = None,
    ):
        self.kubeconfig = str(Path(kubeconfig).expanduser()) if kubeconfig else None
        self.context = context
        self.namespace = namespace
        self._verify_kubeconfig()
        self._verify_kubectl()

    def _verify_kubeconfig(self):
        """Make sure the kubeconfig file can be read."""
        if self.kubeconfig and not Path(self.kubeconfig).is_file():
            raise ClusterConnectionError(f"kubeconfig file not found: {self.kubeconfig}")

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise ClusterConnectionError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            # kubectl exists but refused the version call; list calls will
            # surface the real problem
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig, context and namespace."""
        cmd = ["kubectl"]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if self.namespace and "--all-namespaces" not in args and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr

    def get_json(
        self,
        resource_type: str,
        namespace: Optional[str] = None,
        all_namespaces: bool = False,
    ) -> Dict[str, Any]:
        """Get resource(s) as JSON."""
        args = ["get", resource_type]

        if namespace:
            args.extend(["-n", namespace])
        elif all_namespaces:
            args.append("--all-namespaces")

        args.extend(["-o", "json"])

        success, output = self.execute(args)
        if not success:
            raise KubectlError(f"kubectl get {resource_type} failed", stderr=output)

        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise KubectlError(f"Failed to parse JSON output of kubectl get {resource_type}") from e

    def list_objects(
        self, kind: ResourceKind, namespace: Optional[str] = None
    ) -> List[K8sResource]:
        """List every object of ``kind``; an empty namespace means all namespaces."""
        namespace = namespace or self.namespace
        data = self.get_json(kind.resource, namespace=namespace, all_namespaces=not namespace)

        return [K8sResource(body=item) for item in data.get("items", [])]
