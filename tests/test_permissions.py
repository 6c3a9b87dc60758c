"""Tests for scope parsing and permission sets."""

from __future__ import annotations

import pytest

from sharings.exceptions import BadScopeError
from sharings.permissions import VERBS, PermissionSet, Rule, parse_scope


class TestParseScope:
    def test_type_only(self):
        perms = parse_scope("io.cozy.files")
        assert len(perms) == 1
        rule = perms.rules[0]
        assert rule.type == "io.cozy.files"
        assert rule.title == "rule0"
        assert rule.verbs == VERBS
        assert rule.values == []
        assert rule.selector == ""

    def test_full_rule(self):
        perms = parse_scope("io.cozy.files:GET,PUT:abc,def:dir_id")
        rule = perms.rules[0]
        assert rule.verbs == ("GET", "PUT")
        assert rule.values == ["abc", "def"]
        assert rule.selector == "dir_id"

    def test_all_verbs(self):
        rule = parse_scope("io.cozy.contacts:ALL").rules[0]
        assert rule.verbs == VERBS

    def test_multiple_rules_are_titled_in_order(self):
        perms = parse_scope("io.cozy.files:GET io.cozy.contacts io.cozy.events:POST")
        assert [r.title for r in perms] == ["rule0", "rule1", "rule2"]
        assert [r.type for r in perms] == [
            "io.cozy.files",
            "io.cozy.contacts",
            "io.cozy.events",
        ]

    def test_duplicate_verbs_collapse(self):
        rule = parse_scope("io.cozy.files:GET,GET").rules[0]
        assert rule.verbs == ("GET",)

    @pytest.mark.parametrize(
        "scope",
        [
            "",
            ":GET",
            "io.cozy.files:GET:a:b:c",
            "io.cozy.files:FETCH",
            "io.cozy.files  io.cozy.contacts",
        ],
    )
    def test_bad_scope(self, scope: str):
        with pytest.raises(BadScopeError):
            parse_scope(scope)


class TestScopeString:
    def test_round_trip(self):
        scope = "io.cozy.files:GET,PUT:abc:dir_id io.cozy.contacts io.cozy.events:ALL:x"
        assert parse_scope(scope).to_scope_string() == scope


class TestPermissionSetDocument:
    def test_to_document_keys_by_title(self):
        doc = parse_scope("io.cozy.files:GET:abc io.cozy.contacts").to_document()
        assert list(doc) == ["rule0", "rule1"]
        assert doc["rule0"] == {"type": "io.cozy.files", "verbs": ["GET"], "values": ["abc"]}
        assert doc["rule1"] == {"type": "io.cozy.contacts", "verbs": list(VERBS)}

    def test_from_document(self):
        perms = PermissionSet.from_document(
            {"rule0": {"type": "io.cozy.files", "verbs": ["GET"], "selector": "dir_id"}}
        )
        assert perms.rules == [
            Rule(type="io.cozy.files", title="rule0", verbs=("GET",), selector="dir_id")
        ]

    def test_from_document_defaults_verbs(self):
        perms = PermissionSet.from_document({"r": {"type": "io.cozy.files"}})
        assert perms.rules[0].verbs == VERBS


class TestHandBuiltRules:
    def test_untitled_rules_keyed_by_position(self):
        perms = PermissionSet(rules=[Rule(type="io.cozy.files"), Rule(type="io.cozy.contacts")])
        assert list(perms.to_document()) == ["rule0", "rule1"]

    def test_titled_rules_keep_their_title(self):
        perms = PermissionSet(rules=[Rule(type="io.cozy.files", title="photos")])
        assert list(perms.to_document()) == ["photos"]

    def test_empty_verbs_rejected(self):
        with pytest.raises(BadScopeError, match="no verbs"):
            Rule(type="io.cozy.files", verbs=())

    def test_scope_string_of_built_rule_parses_back(self):
        rule = Rule(type="io.cozy.files", verbs=("GET",), values=["abc"])
        assert parse_scope(rule.to_scope_string()).rules[0].verbs == ("GET",)
