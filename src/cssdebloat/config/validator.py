"""Config file validation for cssdebloat."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cssdebloat.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from cssdebloat.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from cssdebloat.exceptions import ConfigError
from cssdebloat.exceptions.validation import ValidationError
from cssdebloat.rules.schema import validate_allow_entry


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a debloat.yaml file and return all validation errors.

    This is the collect-all counterpart of :func:`load_config` used by
    ``cssdebloat validate-config``. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys()):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "preserve_critical" in raw and not isinstance(raw["preserve_critical"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="preserve_critical",
                message="invalid type for `preserve_critical`",
                hint="expected a boolean",
            )
        )

    val = raw.get("exclude_sheets")
    if val is not None and (not isinstance(val, list) or not all(isinstance(item, str) for item in val)):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="exclude_sheets",
                message="invalid type for `exclude_sheets`",
                hint="expected a list of strings",
            )
        )

    _validate_allow_selectors(raw.get("allow_selectors"), path_str, errors)
    return errors


def _validate_allow_selectors(value: Any, path_str: str, errors: list[ValidationError]) -> None:
    """Validate every entry of ``allow_selectors``, collecting all failures."""
    if value is None:
        return
    if not isinstance(value, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="allow_selectors",
                message="invalid type for `allow_selectors`",
                hint="expected a list of allow entries",
            )
        )
        return

    for index, entry in enumerate(value):
        field = f"allow_selectors[{index}]"
        try:
            validate_allow_entry(entry, field)
        except ConfigError as exc:
            errors.append(ValidationError(code=CFG006, path=path_str, field=field, message=str(exc)))


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
