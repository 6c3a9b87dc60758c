"""Permission rules and scope string parsing.

A scope string is a space-separated list of rules.  Each rule has the
form ``type[:verbs[:values[:selector]]]``, for example::

    io.cozy.files:GET,PUT:abc123,def456 io.cozy.contacts

``verbs`` is either ``ALL`` or a comma list of HTTP verbs and ``values``
is a comma list of ids (or selector values).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import BadScopeError

RULE_SEPARATOR = " "
PART_SEPARATOR = ":"
VALUE_SEPARATOR = ","

ALL_VERBS = "ALL"
VERBS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def split_verbs(raw: str) -> tuple[str, ...]:
    """Parse a verbs part into an ordered tuple; ``ALL`` expands to every verb."""
    if raw == ALL_VERBS:
        return VERBS
    verbs: list[str] = []
    for verb in raw.split(VALUE_SEPARATOR):
        if verb == ALL_VERBS:
            return VERBS
        if verb not in VERBS:
            raise BadScopeError(f"Invalid verb in scope: {verb!r}")
        if verb not in verbs:
            verbs.append(verb)
    return tuple(verbs)


@dataclass
class Rule:
    """A single permission rule on a doctype."""

    type: str
    title: str = ""
    verbs: tuple[str, ...] = VERBS
    values: list[str] = field(default_factory=list)
    selector: str = ""

    def __post_init__(self) -> None:
        if not self.verbs:
            raise BadScopeError(f"Rule on {self.type!r} has no verbs")

    @classmethod
    def parse(cls, raw: str) -> Rule:
        parts = raw.split(PART_SEPARATOR)
        if len(parts) > 4 or not parts[0]:
            raise BadScopeError(f"Invalid scope format: {raw!r}")

        rule = cls(type=parts[0])
        if len(parts) > 1:
            rule.verbs = split_verbs(parts[1])
        if len(parts) > 2:
            rule.values = parts[2].split(VALUE_SEPARATOR)
        if len(parts) > 3:
            rule.selector = parts[3]
        return rule

    def to_scope_string(self) -> str:
        out = self.type
        if self.verbs == VERBS and not self.values and not self.selector:
            return out
        verbs = ALL_VERBS if self.verbs == VERBS else VALUE_SEPARATOR.join(self.verbs)
        out += PART_SEPARATOR + verbs
        if self.values:
            out += PART_SEPARATOR + VALUE_SEPARATOR.join(self.values)
        if self.selector:
            out += PART_SEPARATOR + self.selector
        return out

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": self.type, "verbs": list(self.verbs)}
        if self.values:
            doc["values"] = list(self.values)
        if self.selector:
            doc["selector"] = self.selector
        return doc

    @classmethod
    def from_document(cls, title: str, doc: dict[str, Any]) -> Rule:
        verbs = doc.get("verbs") or list(VERBS)
        return cls(
            type=doc["type"],
            title=title,
            verbs=tuple(verbs),
            values=list(doc.get("values", [])),
            selector=doc.get("selector", ""),
        )


@dataclass
class PermissionSet:
    """Ordered set of rules, keyed by title when stored.

    Untitled rules are keyed by position, ``rule<i>``.
    """

    rules: list[Rule] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def to_scope_string(self) -> str:
        return RULE_SEPARATOR.join(r.to_scope_string() for r in self.rules)

    def to_document(self) -> dict[str, Any]:
        return {
            rule.title or f"rule{i}": rule.to_document() for i, rule in enumerate(self.rules)
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> PermissionSet:
        return cls(rules=[Rule.from_document(title, r) for title, r in doc.items()])


def parse_scope(scope: str) -> PermissionSet:
    """Parse *scope* into a :class:`PermissionSet`.

    Rule *i* is titled ``rule<i>``.  Raises :class:`BadScopeError` on an
    empty scope or a malformed rule.
    """
    if not scope:
        raise BadScopeError("Empty scope")

    rules: list[Rule] = []
    for i, raw in enumerate(scope.split(RULE_SEPARATOR)):
        rule = Rule.parse(raw)
        rule.title = f"rule{i}"
        rules.append(rule)
    return PermissionSet(rules=rules)
