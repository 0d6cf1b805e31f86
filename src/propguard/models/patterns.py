"""
Name pattern data model.

A NamePattern is the normalized form of every include, exclude and whitelist
entry. Literal patterns compare against the whole name; regex patterns match
anywhere in the name; NEVER patterns are what unusable entries degrade to.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PatternKind(Enum):
    """How a NamePattern is tested against a name."""
    LITERAL = "literal"
    REGEX = "regex"
    NEVER = "never"


@dataclass(frozen=True)
class NamePattern:
    """
    A single normalized name pattern.

    Attributes:
        source: The literal text or the regex source.
        kind: How the pattern is tested.
        regex: The compiled expression for REGEX patterns.
    """

    source: str
    kind: PatternKind
    regex: Optional[re.Pattern] = field(default=None, compare=False, repr=False)

    @classmethod
    def literal(cls, name: str) -> "NamePattern":
        return cls(source=name, kind=PatternKind.LITERAL)

    @classmethod
    def from_regex(cls, expression) -> "NamePattern":
        """Build from a regex source string or an already compiled pattern."""
        compiled = expression if isinstance(expression, re.Pattern) else re.compile(expression)
        return cls(source=compiled.pattern, kind=PatternKind.REGEX, regex=compiled)

    @classmethod
    def never(cls, source: str = "") -> "NamePattern":
        return cls(source=source, kind=PatternKind.NEVER)

    def matches(self, name: str) -> bool:
        """Test ``name`` against this pattern. May raise on non-string input."""
        if self.kind is PatternKind.LITERAL:
            return name == self.source
        if self.kind is PatternKind.REGEX:
            return self.regex.search(name) is not None
        return False

    def to_spec(self):
        """Return the TOML-friendly form of this pattern."""
        if self.kind is PatternKind.LITERAL:
            return self.source
        if self.kind is PatternKind.REGEX:
            return {"regex": self.source}
        return {"never": self.source}

    def __str__(self) -> str:
        if self.kind is PatternKind.REGEX:
            return f"/{self.source}/"
        if self.kind is PatternKind.NEVER:
            return f"<never {self.source!r}>"
        return self.source
