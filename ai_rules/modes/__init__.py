from ai_rules.modes.aggregator import ModeAggregator
from ai_rules.modes.models import InstructionFile, ModeAggregation, ModeDefinition

__all__ = ["InstructionFile", "ModeAggregation", "ModeAggregator", "ModeDefinition"]
