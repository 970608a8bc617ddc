"""Safe replacement rules — ordered, global, regex-based text substitutions.

Each rule is idempotent on its own: its replacement never matches its own
pattern, so running a rule over already-migrated content is a no-op.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementRule:
    """A single deterministic substitution."""

    rule_id: str
    pattern: re.Pattern[str]
    replacement: str
    description: str = ""

    def apply(self, content: str) -> str:
        # Callable replacement: the target text is inserted literally.
        return self.pattern.sub(lambda _m: self.replacement, content)


SAFE_REPLACEMENTS: tuple[ReplacementRule, ...] = (
    ReplacementRule(
        "font_weight_bold",
        re.compile(r"\bfont-weight-bold\b"),
        "font-bold",
        "Bootstrap font-weight-bold → tailwind font-bold",
    ),
    ReplacementRule(
        "font_weight_medium",
        re.compile(r"\bfont-weight-medium\b"),
        "font-medium",
        "Bootstrap font-weight-medium → tailwind font-medium",
    ),
    ReplacementRule(
        "font_weight_lighter",
        re.compile(r"\bfont-weight-lighter\b"),
        "font-light",
        "Bootstrap font-weight-lighter → tailwind font-light",
    ),
    ReplacementRule(
        "distill_local_template",
        re.compile(r"https://distill\.pub/template\.v2\.js"),
        "/assets/js/distillpub/template.v2.js",
        "Remote Distill template → vendored copy",
    ),
    ReplacementRule(
        "tailwind_entry_rename",
        re.compile(r"assets/tailwind/input\.css"),
        "assets/tailwind/app.css",
        "Renamed tailwind entry stylesheet",
    ),
)


def apply_rules(
    content: str,
    rules: tuple[ReplacementRule, ...] = SAFE_REPLACEMENTS,
) -> tuple[str, list[str]]:
    """Apply *rules* in order.  Returns the new content and the ids that fired."""
    fired: list[str] = []
    for rule in rules:
        updated = rule.apply(content)
        if updated != content:
            fired.append(rule.rule_id)
        content = updated
    return content, fired
