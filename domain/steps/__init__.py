from domain.steps.base import Step, RetryPolicy, FailurePolicy
from domain.steps.command import CommandStep
from domain.steps.download import DownloadArtifactStep
from domain.steps.filesystem import EnsureDirectoryStep, MigrateConfigStep
from domain.steps.parameters import CollectParametersStep
from domain.steps.services import StopServicesStep, StartServicesStep
from domain.steps.tooling import EnsureToolStep

__all__ = [
    "Step",
    "RetryPolicy",
    "FailurePolicy",
    "CommandStep",
    "DownloadArtifactStep",
    "EnsureDirectoryStep",
    "MigrateConfigStep",
    "CollectParametersStep",
    "StopServicesStep",
    "StartServicesStep",
    "EnsureToolStep",
]
