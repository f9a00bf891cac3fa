"""Best-effort recovery of JSON objects from LLM replies.

Handles the usual damage: markdown code fences, prose around the object,
trailing commas and output truncated mid-object by a token limit.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$", re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")


def strip_code_fences(text: str) -> str:
    """Remove a leading/trailing fenced-block delimiter, if present."""
    text = text.strip()
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    # Unterminated fence (truncated reply)
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _from_first_brace(text: str) -> str:
    start = text.find("{")
    return text[start:] if start != -1 else text


def _slice_object(text: str) -> str:
    """Drop anything before the first '{' and after the last '}'."""
    text = _from_first_brace(text)
    end = text.rfind("}")
    return text[:end + 1] if end != -1 else text


def balance_brackets(text: str) -> str:
    """Close strings, arrays and objects left open by a truncated reply."""
    stack: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "{[":
            stack.append("}" if ch == "{" else "]")
        elif ch in "}]" and stack and stack[-1] == ch:
            stack.pop()

    repaired = text
    if in_string:
        if escaped:
            repaired = repaired[:-1]
        repaired += '"'
    return _drop_dangling(repaired, stack) + "".join(reversed(stack))


def _drop_dangling(text: str, stack: list[str]) -> str:
    """Cut back to the last complete value: trailing separators and orphaned keys go."""
    text = text.rstrip()
    while True:
        if text.endswith((",", ":")):
            text = text[:-1].rstrip()
            continue
        # Inside an object a string preceded by '{' or ',' is a key with no value
        if stack and stack[-1] == "}" and text.endswith('"'):
            key_start = text.rfind('"', 0, len(text) - 1)
            before = text[:key_start].rstrip()
            if key_start != -1 and before.endswith(("{", ",")):
                text = before
                continue
        return text


def remove_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def parse_json_object(text: str | None) -> dict | None:
    """Parse an LLM reply into a dict, repairing it if needed. None on failure."""
    if not text or not text.strip():
        return None

    stripped = strip_code_fences(text)
    candidate = _slice_object(stripped)
    # Truncated replies are repaired from the first '{' to the end, not to the last '}'
    attempts = (
        candidate,
        remove_trailing_commas(candidate),
        remove_trailing_commas(balance_brackets(_from_first_brace(stripped))),
    )
    for attempt in attempts:
        try:
            parsed = json.loads(attempt)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
        logger.warning("Oracle reply is JSON but not an object (%s)", type(parsed).__name__)
        return None

    logger.error("Failed to repair oracle reply as JSON: %.200s", text)
    return None
