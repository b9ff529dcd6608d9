"""Azure Resource Manager implementation of the management API."""

from rgsnapshot.arm.client import ArmManagementClient
from rgsnapshot.arm.credentials import build_credential

__all__ = [
    "ArmManagementClient",
    "build_credential",
]
