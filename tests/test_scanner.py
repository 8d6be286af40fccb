"""
Tests for hubgen.scanner.

Tests cover:
- Module de-duplication and the no-modules precondition
- Only classes defined in a module are enumerated
- Descriptor, hidden and document-membership filters
"""

import types

import pytest

from hubgen.core.errors import NoModulesError
from hubgen.metadata import HubMeta, signalr_hub
from hubgen.scanner import (
    HubScanner,
    dedupe_modules,
    iter_module_types,
    should_be_displayed_on_document,
)
from tests._support import nested_hubs
from tests._support.models import ChatMessage


def _names(pairs) -> list[str]:
    return [cls.__name__ for cls, _ in pairs]


class TestDedupeModules:
    def test_removes_duplicates_keeping_order(self, chat_hubs, mixed_hubs):
        assert dedupe_modules([chat_hubs, mixed_hubs, chat_hubs]) == (chat_hubs, mixed_hubs)

    def test_accepts_generator(self, chat_hubs):
        assert dedupe_modules(m for m in [chat_hubs]) == (chat_hubs,)

    @pytest.mark.parametrize("modules", [None, [], ()])
    def test_no_modules_raises(self, modules):
        with pytest.raises(NoModulesError, match="No modules provided"):
            dedupe_modules(modules)

    def test_empty_generator_raises(self):
        with pytest.raises(NoModulesError):
            HubScanner(m for m in [])


class TestIterModuleTypes:
    def test_reexported_class_not_enumerated(self, mixed_hubs):
        names = [cls.__name__ for cls in iter_module_types(mixed_hubs)]
        assert "IChatHub" not in names
        assert "ChatMessage" not in names
        assert "StrictHub" in names

    def test_namespace_order(self, mixed_hubs):
        names = [cls.__name__ for cls in iter_module_types(mixed_hubs)]
        assert names.index("StrictHub") < names.index("MethodsHub") < names.index("OpenHub")

    def test_synthetic_module(self):
        module = types.ModuleType("synthetic_hubs")

        @signalr_hub()
        class LiveHub:
            pass

        LiveHub.__module__ = module.__name__
        module.LiveHub = LiveHub
        module.Imported = int
        assert list(iter_module_types(module)) == [LiveHub]

    def test_nested_classes_follow_enclosing_class(self):
        names = [cls.__qualname__ for cls in iter_module_types(nested_hubs)]
        assert names == ["Realtime", "Realtime.PresenceHub", "Realtime.PresenceHub.TypingHub"]

    def test_class_alias_in_body_not_enumerated(self):
        assert ChatMessage not in list(iter_module_types(nested_hubs))


class TestDocumentMembership:
    def test_empty_names_match_every_document(self):
        assert should_be_displayed_on_document(HubMeta(), "anything")

    def test_listed_document(self):
        assert should_be_displayed_on_document(HubMeta(document_names=("v1", "v2")), "v2")

    def test_unlisted_document(self):
        assert not should_be_displayed_on_document(HubMeta(document_names=("admin",)), "v1")


class TestHubScanner:
    def test_get_hubs_excludes_plain_and_hidden(self, mixed_hubs):
        names = _names(HubScanner([mixed_hubs]).get_hubs())
        assert "NotAHub" not in names
        assert "HiddenHub" not in names
        assert names == ["AdminHub", "StrictHub", "MethodsHub", "OpenHub", "IVersionedHub"]

    def test_scan_applies_document_filter(self, mixed_hubs):
        names = _names(HubScanner([mixed_hubs]).scan("v1"))
        assert names == ["StrictHub", "MethodsHub", "OpenHub"]

    def test_scan_other_document(self, mixed_hubs):
        assert "IVersionedHub" in _names(HubScanner([mixed_hubs]).scan("v2"))
        assert "AdminHub" in _names(HubScanner([mixed_hubs]).scan("admin"))

    def test_scan_yields_descriptor(self, chat_hubs):
        [(cls, meta)] = list(HubScanner([chat_hubs]).scan("v1"))
        assert cls.__name__ == "IChatHub"
        assert meta.path == "chat/[Hub]"

    def test_duplicate_module_scanned_once(self, chat_hubs):
        scanner = HubScanner([chat_hubs, chat_hubs])
        assert len(list(scanner.scan("v1"))) == 1

    def test_hub_found_in_its_own_module_only(self, chat_hubs, mixed_hubs):
        names = _names(HubScanner([mixed_hubs, chat_hubs]).scan("v1"))
        assert names.count("IChatHub") == 1

    def test_nested_hubs_discovered(self):
        assert _names(HubScanner([nested_hubs]).get_hubs()) == ["PresenceHub", "TypingHub"]
