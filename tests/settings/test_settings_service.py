from __future__ import annotations

from paystream.core.constants import DEFAULT_DEPARTMENTS, DEFAULT_POSITIONS
from paystream.settings.service import SettingsService


def test_load_falls_back_to_defaults(store):
    store.settings.values["positions"] = "not a list"

    vocabulary = SettingsService(store.settings).load()

    assert vocabulary.departments == DEFAULT_DEPARTMENTS
    assert vocabulary.positions == DEFAULT_POSITIONS


def test_load_reads_stored_lists(store):
    store.settings.values["departments"] = ["Engineering", "Legal"]

    assert SettingsService(store.settings).load().departments == ("Engineering", "Legal")


def test_add_value_rewrites_whole_list(store):
    svc = SettingsService(store.settings)

    updated = svc.add_value("departments", ("HR",), "  Legal ")

    assert updated == ("HR", "Legal")
    assert store.settings.values["departments"] == ["HR", "Legal"]


def test_add_blank_or_duplicate_is_a_no_op(store):
    svc = SettingsService(store.settings)

    assert svc.add_value("departments", ("HR",), "   ") == ("HR",)
    assert svc.add_value("departments", ("HR",), "HR") == ("HR",)
    assert "departments" not in store.settings.values


def test_remove_value(store):
    svc = SettingsService(store.settings)

    assert svc.remove_value("positions", ("Lead", "Intern"), "Lead") == ("Intern",)
    assert store.settings.values["positions"] == ["Intern"]
    assert svc.remove_value("positions", ("Intern",), "CEO") == ("Intern",)
