from ai_rules.constants import (
    CLAUDE_AGENTS_DIR,
    CLAUDE_COMMANDS_DIR,
    CLAUDE_LOCAL_RULES_DIR,
    CLAUDE_RULES_DIR,
    CLINE_RULES_DIR,
    CURSOR_RULE_SUFFIX,
    CURSOR_RULES_DIR,
    ROO_RULES_DIR,
)
from ai_rules.models import ConflictPolicy, SyncTarget
from ai_rules.source.models import Origin
from ai_rules.targets.models import TargetSpec
from ai_rules.targets.synchronizer import TargetSynchronizer
from ai_rules.targets.wrappers import wrap_cursor_local_rule, wrap_cursor_rule

CURSOR_SPEC = TargetSpec(
    target=SyncTarget.CURSOR,
    rules_dir=CURSOR_RULES_DIR,
    local_policy=ConflictPolicy.APPEND,
    suffix=CURSOR_RULE_SUFFIX,
    wrap=wrap_cursor_rule,
    wrap_local=wrap_cursor_local_rule,
)

ROO_SPEC = TargetSpec(
    target=SyncTarget.ROO,
    rules_dir=ROO_RULES_DIR,
    local_policy=ConflictPolicy.APPEND,
    separator="\n\n",
)

CLINE_SPEC = TargetSpec(
    target=SyncTarget.CLINE,
    rules_dir=CLINE_RULES_DIR,
    local_policy=ConflictPolicy.APPEND,
)

CLAUDE_SPEC = TargetSpec(
    target=SyncTarget.CLAUDE,
    rules_dir=CLAUDE_RULES_DIR,
    local_policy=ConflictPolicy.OVERWRITE,
    local_dir=CLAUDE_LOCAL_RULES_DIR,
    routes={
        Origin.PERSONA: CLAUDE_AGENTS_DIR,
        Origin.COMMAND: CLAUDE_COMMANDS_DIR,
    },
)

TARGET_SPECS: tuple[TargetSpec, ...] = (CURSOR_SPEC, ROO_SPEC, CLINE_SPEC, CLAUDE_SPEC)


def build_synchronizers() -> list[TargetSynchronizer]:
    return [TargetSynchronizer(spec) for spec in TARGET_SPECS]
