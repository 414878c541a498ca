"""Release signing tasks.

Each task runs one configuration pass, prints its result, and turns a
configuration error into its guidance text and a non-zero exit.
"""

import sys
import json
import shlex
import logging
from pathlib import Path

import yaml
from invoke import task

from signing_gate.build.config.exceptions import ConfigException
from signing_gate.build.config.loading import load_build_config
from signing_gate.build.config.models import LoadParams
from signing_gate.build.config.settings import load_settings, key_properties_path
from signing_gate.build.tasks import setup_logging

logger = logging.getLogger(__name__)

KEY_PROPERTIES_TEMPLATE = """\
# Release signing credentials. Keep this file out of version control.
storePassword=<store password>
keyPassword=<key password>
keyAlias=upload
# Relative paths are resolved against the app module directory (app/)
storeFile=upload-keystore.jks
"""

_COMMON_HELP = {
    'project_root': 'Project directory containing key.properties (default: current directory)',
    'policy': 'Signing policy override: lenient or strict',
    'debug': 'Enable debug logging',
}


def _handle_config_error(e: ConfigException):
    """Handle configuration errors with built-in guidance."""
    print(e.guidance, file=sys.stderr)
    sys.exit(1)


def _load(project_root, policy):
    try:
        return load_build_config(LoadParams(project_root=project_root, policy=policy))
    except ConfigException as e:
        _handle_config_error(e)


@task(help=_COMMON_HELP)
def check(ctx, project_root=".", policy=None, debug=False):
    """
    Validate release signing and report whether release will be signed.

    Examples:
        invoke signing.check
        invoke signing.check --policy=strict
    """
    setup_logging(debug)
    config = _load(project_root, policy)

    signing = config.signing
    if signing.signed:
        print(f"✅ Release signed with '{signing.identity.name}' "
              f"(alias {signing.identity.key_alias}, policy {signing.policy.value})")
    else:
        print(f"⚠️  Release unsigned: {signing.outcome.value} "
              f"(policy {signing.policy.value}, {signing.properties_file})")


@task(help=_COMMON_HELP)
def show(ctx, project_root=".", policy=None, debug=False):
    """
    Print the signing resolution as JSON, with passwords masked.
    """
    setup_logging(debug)
    config = _load(project_root, policy)
    print(json.dumps(config.signing.masked(), indent=2))


@task(help=_COMMON_HELP)
def variants(ctx, project_root=".", policy=None, debug=False):
    """
    Print the assembled build variants as YAML.

    Outputs:
        stdout: YAML (parseable)
    """
    setup_logging(debug)
    config = _load(project_root, policy)

    output = {
        'default_config': config.default_config.model_dump(exclude_none=True),
        'build_types': {name: variant.summary() for name, variant in config.variants.items()},
    }
    yaml.dump(output, sys.stdout, default_flow_style=False, sort_keys=True)


@task(help=_COMMON_HELP)
def injected_args(ctx, project_root=".", policy=None, debug=False):
    """
    Print Gradle -P arguments that sign an assemble run with the release identity.

    Any field missing from key.properties is reported here, even under the
    lenient policy.

    Examples:
        ./gradlew assembleRelease $(invoke signing.injected-args)
    """
    setup_logging(debug)
    config = _load(project_root, policy)

    identity = config.release.signing_identity
    if identity is None:
        print(f"❌ Release has no signing identity ({config.signing.outcome.value})", file=sys.stderr)
        sys.exit(1)

    try:
        properties = identity.injected_properties()
    except ConfigException as e:
        _handle_config_error(e)

    print(" ".join(shlex.quote(f"-P{name}={value}") for name, value in properties.items()))


@task(help={
    'project_root': _COMMON_HELP['project_root'],
    'force': 'Overwrite an existing key.properties',
})
def init(ctx, project_root=".", force=False):
    """
    Write a key.properties template to fill in.
    """
    try:
        settings = load_settings(project_root=project_root)
    except ConfigException as e:
        _handle_config_error(e)

    target = key_properties_path(settings, project_root)
    if target.exists() and not force:
        print(f"❌ {target} already exists (use --force to overwrite)", file=sys.stderr)
        sys.exit(1)

    Path(target).parent.mkdir(parents=True, exist_ok=True)
    target.write_text(KEY_PROPERTIES_TEMPLATE, encoding='latin-1')
    logger.info(f"Wrote key.properties template to {target}")
    print(f"📝 Wrote {target}")
