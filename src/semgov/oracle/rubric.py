"""Fixed prompts sent to the classification oracle."""

NO_BUMP_RULES = """\
- NO version update (NONE) for:
  * Pure formatting changes (whitespace, indentation, line breaks)
  * Minor grammar/typo fixes that don't change meaning
  * Comment-only changes
  * Documentation formatting"""

BUMP_KIND_RULES = """\
- PATCH: Bug fixes or substantive changes to existing functionality that don't alter behavior (e.g., fixing a bug, improving error messages, updating documentation content)
- MINOR: New command, skill, agent, or addition to existing functionality that doesn't break existing behavior
- MAJOR: Removes existing skill/command/agent OR makes changes that drastically alter behavior of existing functionality"""

REQUIRED_RULES = """\
- VERSION UPDATE REQUIRED for:
  * Changes to plugin.json metadata (name, description, author, etc.)
  * Changes to command/skill/agent configurations
  * Changes to YAML frontmatter in command files
  * Substantive content changes that affect functionality
  * Changes to command instructions or behavior
  * New commands, skills, or agents added
  * Removed commands, skills, or agents"""

GRADED_TEMPLATE = """\
Analyze this git diff for the "{plugin}" plugin and determine the appropriate semantic version bump:

FIRST, determine if ANY version update is needed:
{no_bump_rules}

IF a version update IS needed, determine the type:
{bump_kind_rules}

CHANGES:
```diff
{diff}
```

Respond in this exact format:
DECISION: <PATCH|MINOR|MAJOR|NONE>
REASON: <one sentence explaining why>"""

BINARY_TEMPLATE = """\
You are reviewing changes to a plugin to determine if a version update is required.

CHANGES:
```diff
{diff}
```

RULES FOR VERSION UPDATES:
{no_bump_rules}

{required_rules}

Respond with ONLY ONE WORD:
- "YES" if a version update is required
- "NO" if no version update is needed

Response:"""


def graded_prompt(plugin: str, diff: str) -> str:
    """Prompt asking for a NONE/PATCH/MINOR/MAJOR decision with a reason."""
    return GRADED_TEMPLATE.format(
        plugin=plugin,
        no_bump_rules=NO_BUMP_RULES,
        bump_kind_rules=BUMP_KIND_RULES,
        diff=diff,
    )


def binary_prompt(diff: str) -> str:
    """Prompt asking for a single YES/NO on whether a bump is required."""
    return BINARY_TEMPLATE.format(
        no_bump_rules=NO_BUMP_RULES,
        required_rules=REQUIRED_RULES,
        diff=diff,
    )
