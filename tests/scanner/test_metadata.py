"""Tests for readmegen.scanner.metadata."""

from __future__ import annotations

import pytest

from tests._fixtures.module_builder import ModuleBuilder

from readmegen.errors import ManifestParseError
from readmegen.models import NO_DESCRIPTION
from readmegen.scanner.metadata import MetadataLoader


def test_load_reads_manifest_fields(module_builder: ModuleBuilder) -> None:
    module_builder.write(
        {
            "demo.info.yml": """
                name: Demo Module
                description: "X"
                dependencies:
                  - drupal:node
                  - drupal:views
                  - token:token
            """,
        }
    )

    info = MetadataLoader().load(module_builder.path())

    assert info.name == "Demo Module"
    assert info.description == "X"
    assert info.dependencies == ("drupal:node", "drupal:views", "token:token")


def test_load_falls_back_without_manifest(module_builder: ModuleBuilder) -> None:
    info = MetadataLoader().load(module_builder.path())

    assert info.name == "demo"
    assert info.description == NO_DESCRIPTION
    assert info.dependencies == ()


def test_load_falls_back_for_missing_keys(module_builder: ModuleBuilder) -> None:
    module_builder.write({"demo.info.yml": "type: module\ncore_version_requirement: ^10\n"})

    info = MetadataLoader().load(module_builder.path())

    assert info.name == "demo"
    assert info.description == NO_DESCRIPTION
    assert info.dependencies == ()


def test_load_treats_empty_manifest_as_defaults(module_builder: ModuleBuilder) -> None:
    module_builder.write({"demo.info.yml": ""})

    info = MetadataLoader().load(module_builder.path())

    assert info.name == "demo"


def test_load_uses_first_manifest_in_sorted_order(module_builder: ModuleBuilder) -> None:
    module_builder.write(
        {
            "zeta.info.yml": "name: Zeta\n",
            "alpha.info.yml": "name: Alpha\n",
        }
    )

    info = MetadataLoader().load(module_builder.path())

    assert info.name == "Alpha"


def test_load_rejects_malformed_yaml(module_builder: ModuleBuilder) -> None:
    module_builder.write({"demo.info.yml": "name: [unclosed\n"})

    with pytest.raises(ManifestParseError):
        MetadataLoader().load(module_builder.path())


def test_load_rejects_non_mapping_manifest(module_builder: ModuleBuilder) -> None:
    module_builder.write({"demo.info.yml": "- just\n- a list\n"})

    with pytest.raises(ManifestParseError) as excinfo:
        MetadataLoader().load(module_builder.path())

    assert excinfo.value.stage == "manifest"


def test_load_submodules_reads_nested_manifests(module_builder: ModuleBuilder) -> None:
    module_builder.write(
        {
            "demo.info.yml": "name: Demo\n",
            "modules/demo_ui/demo_ui.info.yml": "name: Demo UI\ndescription: Admin screens.\n",
            "modules/demo_extra/demo_extra.info.yml": "name: Demo Extra\n",
            "modules/demo_extra/nested/deeper/ignored.info.yml": "name: Ignored\n",
        }
    )

    submodules = MetadataLoader().load_submodules(module_builder.path())

    assert [(item.name, item.description) for item in submodules] == [
        ("demo_extra", NO_DESCRIPTION),
        ("demo_ui", "Admin screens."),
    ]
