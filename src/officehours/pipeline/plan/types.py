from dataclasses import dataclass, field
from typing import Dict, Optional, Union
import re

REQUEST_ID_HEADERS = ("x-nf-request-id", "x-request-id")

# JSON Schema `pattern` follows ECMA-262: \d and \b are ASCII-only, \s and
# trimming use this whitespace set, and `.` stops at any line terminator.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
LINE_TERMINATORS = "\n\r\u2028\u2029"

_SPACE_CHARS = "".join(re.escape(c) for c in WHITESPACE)
_DOT_CLASS = "[^" + "".join(re.escape(c) for c in LINE_TERMINATORS) + "]"


def trim(value: str) -> str:
    return value.strip(WHITESPACE)


def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile a JSON Schema pattern so it matches the way the schema engine does."""
    out = []
    in_class = False
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            escaped = pattern[i + 1]
            if escaped == "s":
                out.append(_SPACE_CHARS if in_class else f"[{_SPACE_CHARS}]")
            elif escaped == "S" and not in_class:
                out.append(f"[^{_SPACE_CHARS}]")
            else:
                out.append(ch + escaped)
            i += 2
            continue
        if ch == "[" and not in_class:
            in_class = True
        elif ch == "]" and in_class:
            in_class = False
        elif ch == "." and not in_class:
            ch = _DOT_CLASS
        out.append(ch)
        i += 1
    return re.compile("".join(out), re.ASCII)


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one result property.

    A rule with min_items/max_items set describes an array of strings; without
    them it describes a single string. min_length applies to the trimmed value.
    """
    name: str
    min_length: int
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    pattern: Optional[str] = None

    @property
    def is_array(self) -> bool:
        return self.min_items is not None

    @property
    def regex(self) -> Optional["re.Pattern[str]"]:
        return compile_pattern(self.pattern) if self.pattern else None


@dataclass(frozen=True)
class PlanVariant:
    """Everything that differs between the two endpoints."""
    name: str
    input_field: str
    task: str #task key in config.yaml
    prompt_ref: str #e.g. "triage/respond@v1"
    schema_name: str
    next_steps_pattern: str


@dataclass
class RequestEnvelope:
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Union[str, bytes]] = None #raw text, or bytes straight off the socket
    is_base64_encoded: bool = False

    def __post_init__(self):
        self.method = (self.method or "").upper()
        self.headers = {k.lower(): v for k, v in (self.headers or {}).items()}

    @property
    def request_id(self) -> Optional[str]:
        for name in REQUEST_ID_HEADERS:
            value = self.headers.get(name)
            if value:
                return value
        return None


@dataclass(frozen=True)
class NormalizedInput:
    text: str
