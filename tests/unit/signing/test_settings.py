"""Tests for layered settings."""

import pytest

from signing_gate.build.config.exceptions import InvalidSettingsException, UnknownSigningPolicyException
from signing_gate.build.config.models import SigningPolicy
from signing_gate.build.config.settings import (
    ENV_KEY_PROPERTIES,
    ENV_POLICY,
    key_properties_path,
    store_file_base,
    load_settings,
)


def test_package_defaults(project_root):
    settings = load_settings(project_root=str(project_root))

    assert settings.application_id == "com.example.training"
    assert settings.namespace == "com.example.training"
    assert settings.display_name == "NAP Finder"
    assert settings.debug_display_name == "NAP Finder (Dev)"
    assert settings.debug_application_id_suffix == ".debug"
    assert settings.key_properties == "key.properties"
    assert settings.app_module == "app"
    assert settings.policy is SigningPolicy.LENIENT
    assert settings.verify_store_file is False


def test_project_file_overrides_defaults(project_root):
    (project_root / "signing.yaml").write_text(
        "signing:\n"
        "  display_name: NAP Finder Pro\n"
        "  policy: STRICT\n"
        "  min_sdk: 21\n"
        "  version_name: 1.2.0\n"
    )

    settings = load_settings(project_root=str(project_root))

    assert settings.display_name == "NAP Finder Pro"
    assert settings.policy is SigningPolicy.STRICT
    assert settings.min_sdk == 21
    assert settings.version_name == "1.2.0"
    assert settings.debug_display_name == "NAP Finder (Dev)"


def test_environment_overrides_project_file(project_root, monkeypatch):
    (project_root / "signing.yaml").write_text("signing:\n  policy: lenient\n")
    monkeypatch.setenv(ENV_POLICY, "strict")
    monkeypatch.setenv(ENV_KEY_PROPERTIES, "secrets/release.properties")

    settings = load_settings(project_root=str(project_root))

    assert settings.policy is SigningPolicy.STRICT
    assert settings.key_properties == "secrets/release.properties"


def test_explicit_arguments_win(project_root, monkeypatch):
    monkeypatch.setenv(ENV_POLICY, "strict")

    settings = load_settings(project_root=str(project_root), policy="lenient")

    assert settings.policy is SigningPolicy.LENIENT


def test_unknown_policy(project_root):
    with pytest.raises(UnknownSigningPolicyException) as exc_info:
        load_settings(project_root=str(project_root), policy="sometimes")
    assert exc_info.value.policy == "sometimes"
    assert "lenient, strict" in exc_info.value.guidance


def test_unknown_setting_is_rejected(project_root):
    (project_root / "signing.yaml").write_text("signing:\n  sign_everything: true\n")

    with pytest.raises(InvalidSettingsException):
        load_settings(project_root=str(project_root))


def test_unknown_top_level_key_is_rejected(project_root):
    (project_root / "signing.yaml").write_text("build:\n  policy: strict\n")

    with pytest.raises(InvalidSettingsException):
        load_settings(project_root=str(project_root))


def test_invalid_yaml_is_rejected(project_root):
    (project_root / "signing.yaml").write_text("signing: [unclosed\n")

    with pytest.raises(InvalidSettingsException):
        load_settings(project_root=str(project_root))


def test_empty_project_file_uses_defaults(project_root):
    (project_root / "signing.yaml").write_text("")

    assert load_settings(project_root=str(project_root)).display_name == "NAP Finder"


def test_explicit_settings_file(tmp_path, project_root):
    settings_file = tmp_path / "ci-signing.yaml"
    settings_file.write_text("signing:\n  display_name: CI Build\n")

    settings = load_settings(project_root=str(project_root), settings_file=str(settings_file))

    assert settings.display_name == "CI Build"


def test_key_properties_path(project_root, tmp_path):
    settings = load_settings(project_root=str(project_root))
    assert key_properties_path(settings, str(project_root)) == project_root / "key.properties"

    absolute = tmp_path / "elsewhere.properties"
    settings = load_settings(project_root=str(project_root), key_properties=str(absolute))
    assert key_properties_path(settings, str(project_root)) == absolute


def test_store_file_base_is_app_module(project_root):
    settings = load_settings(project_root=str(project_root))
    assert store_file_base(settings, str(project_root)) == project_root / "app"

    (project_root / "signing.yaml").write_text("signing:\n  app_module: mobile\n")
    settings = load_settings(project_root=str(project_root))
    assert store_file_base(settings, str(project_root)) == project_root / "mobile"
