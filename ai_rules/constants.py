from typing import Final


RULE_SUFFIX: Final[str] = ".md"
CURSOR_RULE_SUFFIX: Final[str] = ".mdc"

INDEX_FILENAME: Final[str] = "index.md"
OPTIONAL_DOCS_DIRNAME: Final[str] = "ai-docs"
PERSONAS_DIRNAME: Final[str] = "personas"
COMMANDS_DIRNAME: Final[str] = "commands"
MODES_DIRNAME: Final[str] = "modes"
MODE_DESCRIPTOR_FILENAME: Final[str] = "index.json"
MODE_INSTRUCTIONS_FILENAME: Final[str] = "instructions.md"
MODE_DIR_PREFIX: Final[str] = "rules-"

DEFAULT_SOURCE_DIRNAME: Final[str] = "src"
LOCAL_RULES_DIRNAME: Final[str] = "local-ai-rules"
DOCS_CONFIG_FILENAME: Final[str] = ".ai-rules-config.json"

CURSOR_RULES_DIR: Final[str] = ".cursor/rules"
ROO_RULES_DIR: Final[str] = ".roo/rules"
CLINE_RULES_DIR: Final[str] = ".clinerules"
CLAUDE_RULES_DIR: Final[str] = ".claude/rules"
CLAUDE_LOCAL_RULES_DIR: Final[str] = ".claude/local-rules"
CLAUDE_AGENTS_DIR: Final[str] = ".claude/agents"
CLAUDE_COMMANDS_DIR: Final[str] = ".claude/commands"
COPILOT_INSTRUCTIONS_PATH: Final[str] = ".github/copilot-instructions.md"

ROO_MODES_FILENAME: Final[str] = ".roomodes"
ROO_MODE_RULES_DIR: Final[str] = ".roo/rules"

MERGE_SEPARATOR: Final[str] = "\n\n"
