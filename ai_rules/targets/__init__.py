from ai_rules.targets.merged import MergedInstructionsTarget
from ai_rules.targets.models import TargetSpec
from ai_rules.targets.registry import TARGET_SPECS, build_synchronizers
from ai_rules.targets.synchronizer import TargetSynchronizer

__all__ = [
    "MergedInstructionsTarget",
    "TARGET_SPECS",
    "TargetSpec",
    "TargetSynchronizer",
    "build_synchronizers",
]
