# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for step catalog construction and selection."""

from __future__ import annotations

from wpstarter.steps import CheckPathStep, IndexStep, build_catalog, select_steps


def test_custom_step_replaces_builtin_in_place() -> None:
    catalog = build_catalog({"a": "pkg.A", "b": "pkg.B", "c": "pkg.C"}, {"b": "custom.B2"}, [])

    assert list(catalog) == ["a", "b", "c"]
    assert catalog["b"] == "custom.B2"


def test_new_custom_steps_are_appended() -> None:
    catalog = build_catalog({"a": "pkg.A"}, {"z": "custom.Z"}, [])

    assert list(catalog.items()) == [("a", "pkg.A"), ("z", "custom.Z")]


def test_skip_by_name_or_reference_regardless_of_origin() -> None:
    catalog = build_catalog(
        {"a": "pkg.A", "b": "pkg.B"},
        {"c": "custom.C", "d": "custom.D"},
        ["b", "custom.D"],
    )

    assert list(catalog) == ["a", "c"]


def test_skip_matches_callable_references() -> None:
    def step_a(locator):  # noqa: ANN001, ANN202
        return None

    catalog = build_catalog({"a": step_a, "b": "pkg.B"}, {}, [step_a])

    assert list(catalog) == ["b"]


def test_empty_names_are_dropped() -> None:
    catalog = build_catalog({"": "pkg.Empty", "a": "pkg.A"}, {}, [])

    assert list(catalog) == ["a"]


def test_selection_keeps_catalog_order() -> None:
    catalog = {"a": "pkg.A", "b": "pkg.B", "c": "pkg.C"}

    assert select_steps(catalog, ["c", "a"]) == [("a", "pkg.A"), ("c", "pkg.C")]


def test_empty_selection_selects_everything() -> None:
    catalog = {"a": "pkg.A", "b": "pkg.B"}

    assert [name for name, _ in select_steps(catalog, [])] == ["a", "b"]


def test_unknown_selection_selects_nothing_more() -> None:
    catalog = {"a": "pkg.A", "b": "pkg.B"}

    assert select_steps(catalog, ["b", "missing"]) == [("b", "pkg.B")]
    assert select_steps(catalog, ["missing"]) == []


def test_non_string_selection_is_ignored() -> None:
    catalog = {"a": "pkg.A", "b": "pkg.B"}

    assert select_steps(catalog, [1, None, "b"]) == [("b", "pkg.B")]


def test_builtin_override_and_skip_end_to_end_order() -> None:
    catalog = build_catalog({"A": "A", "B": "B", "C": "C"}, {"B": "B2"}, ["C"])

    assert select_steps(catalog) == [("A", "A"), ("B", "B2")]


def test_skip_by_dotted_path_matches_class_reference() -> None:
    builtin = {"check-paths": CheckPathStep, "index": IndexStep}

    catalog = build_catalog(builtin, {}, ["wpstarter.steps.builtin.IndexStep"])

    assert list(catalog) == ["check-paths"]


def test_colon_and_dotted_paths_name_the_same_step() -> None:
    custom = {"index": "wpstarter.steps.builtin:IndexStep"}

    catalog = build_catalog({"check-paths": CheckPathStep}, custom, ["wpstarter.steps.builtin.IndexStep"])

    assert list(catalog) == ["check-paths"]


def test_unresolvable_skip_entries_match_nothing() -> None:
    builtin = {"check-paths": CheckPathStep, "index": IndexStep}

    assert list(build_catalog(builtin, {}, ["no_such_module.IndexStep", ":IndexStep"])) == ["check-paths", "index"]
