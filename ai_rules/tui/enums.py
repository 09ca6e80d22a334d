from enum import Enum

from ai_rules.models import ActionStatus


class PanelStyle(str, Enum):
    OVERVIEW = "blue"
    TARGET = "cyan"
    EMPTY = "dim"
    WARNINGS = "yellow"
    FAILURE = "red"
    APPLY = "green"


ACTION_STATUS_STYLE = {
    ActionStatus.CREATE: "green",
    ActionStatus.UPDATE: "cyan",
    ActionStatus.APPEND: "magenta",
    ActionStatus.NOOP: "dim",
}
