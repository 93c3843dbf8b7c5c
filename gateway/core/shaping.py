"""Model-specific response shaping.

The reasoning chat model emits its chain of thought inside a
`<think>...</think>` block followed by the final answer. `extract_reasoning`
splits that output into its two segments.

Group semantics of `THINK_PATTERN`:
    1. reasoning text between the tags (non-greedy, may span lines)
    2. everything after the closing tag

Text before the opening tag is ignored. A `None` result means the output did
not contain the tagged structure; callers treat that as a provider anomaly.
"""

import re

from gateway.llm.types import StructuredChatResult

THINK_PATTERN = re.compile(r"<think>(.*?)</think>(.*)", re.DOTALL)


def extract_reasoning(raw_text: str) -> StructuredChatResult | None:
    """Split tagged model output into reasoning and answer, or return `None`."""
    match = THINK_PATTERN.search(raw_text or "")
    if match is None:
        return None

    raw_think, raw_say = match.groups()
    return StructuredChatResult(reasoning=raw_think.strip(), answer=raw_say.strip())
