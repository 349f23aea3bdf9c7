"""Validation utilities for Doubles Rota.

This module provides reusable validation functions with consistent error handling.
Each ``validate_*`` function returns a :class:`ValidationResult`; the ``*_strict``
variants raise instead.
"""

from typing import Any, Dict, Optional, Sequence

from doublesrota.constants import (
    GENDER_ALIASES,
    GENDER_OTHER,
    GENDERS,
    MAX_SKILL,
    MIN_SKILL,
    PAIRING_MODE_ALIASES,
    PAIRING_MODES,
    ROTATION_FOCI,
    ROTATION_FOCUS_ALIASES,
    SKILL_MODE_ALIASES,
    SKILL_MODES,
    UNIQUENESS_ALIASES,
    UNIQUENESS_NAMES,
)
from doublesrota.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a player's display name.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with the trimmed name
    """
    if not name or not str(name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="Please enter a name.",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


def validate_skill(
    skill: Any, min_skill: int = MIN_SKILL, max_skill: int = MAX_SKILL
) -> ValidationResult:
    """Validate a skill level.

    Args:
        skill: Skill value to validate (int or numeric string)
        min_skill: Minimum allowed skill
        max_skill: Maximum allowed skill

    Returns:
        ValidationResult with the skill as an int
    """
    if isinstance(skill, bool):
        skill = None
    try:
        skill_int = int(skill)
    except (ValueError, TypeError, OverflowError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Skill must be between {min_skill} and {max_skill}.",
        )

    if isinstance(skill, float) and skill != skill_int:
        return ValidationResult(
            is_valid=False,
            error_message=f"Skill must be a whole number: {skill}",
        )

    if skill_int < min_skill or skill_int > max_skill:
        return ValidationResult(
            is_valid=False,
            error_message=f"Skill must be between {min_skill} and {max_skill}.",
        )

    return ValidationResult(is_valid=True, sanitized_value=skill_int)


def normalize_gender(gender: Optional[str]) -> str:
    """Map any stored or typed gender onto ``M``, ``F`` or ``O``."""
    if not gender:
        return GENDER_OTHER
    value = str(gender).strip()
    if value in GENDERS:
        return value
    return GENDER_ALIASES.get(value.lower(), GENDER_OTHER)


def validate_player_fields(name: Optional[str], gender: Optional[str], skill: Any):
    """Validate the fields of a new player and return them sanitized.

    Raises:
        InvalidPlayerDataException: If the name or skill is invalid

    Returns:
        Tuple of (name, gender code, skill)
    """
    name_result = validate_name(name)
    if not name_result:
        raise InvalidPlayerDataException(name_result.error_message)
    skill_result = validate_skill(skill)
    if not skill_result:
        raise InvalidPlayerDataException(skill_result.error_message)
    return (
        name_result.sanitized_value,
        normalize_gender(gender),
        skill_result.sanitized_value,
    )


# ========== Configuration Validation ==========


def _validate_choice(
    value: Any,
    choices: Sequence[str],
    aliases: Dict[str, str],
    field_name: str,
) -> ValidationResult:
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False, error_message=f"{field_name} is required"
        )
    text = str(value).strip().lower().replace("_", "-").replace(" ", "-")
    if text in choices:
        return ValidationResult(is_valid=True, sanitized_value=text)
    if text in aliases:
        return ValidationResult(is_valid=True, sanitized_value=aliases[text])
    return ValidationResult(
        is_valid=False,
        error_message=f"{field_name} must be one of {', '.join(choices)}: {value}",
    )


def validate_pairing_mode(value: Any) -> ValidationResult:
    """Validate a pairing mode, accepting legacy aliases."""
    return _validate_choice(value, PAIRING_MODES, PAIRING_MODE_ALIASES, "Pairing mode")


def validate_skill_mode(value: Any) -> ValidationResult:
    """Validate a skill mode, accepting legacy aliases."""
    return _validate_choice(value, SKILL_MODES, SKILL_MODE_ALIASES, "Skill mode")


def validate_rotation_focus(value: Any) -> ValidationResult:
    """Validate a rotation focus, accepting legacy aliases."""
    return _validate_choice(
        value, ROTATION_FOCI, ROTATION_FOCUS_ALIASES, "Rotation focus"
    )


def validate_uniqueness_importance(value: Any) -> ValidationResult:
    """Validate the uniqueness importance dial (1-3 or low/medium/high)."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in UNIQUENESS_ALIASES:
            return ValidationResult(
                is_valid=True, sanitized_value=UNIQUENESS_ALIASES[text]
            )
        value = text
    try:
        level = int(value)
    except (ValueError, TypeError, OverflowError):
        level = None
    if isinstance(value, bool) or level not in UNIQUENESS_NAMES:
        return ValidationResult(
            is_valid=False,
            error_message=f"Uniqueness importance must be 1, 2 or 3: {value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=level)


def validate_strict(result: ValidationResult) -> Any:
    """Return the sanitized value of a configuration check or raise.

    Raises:
        InvalidConfigurationException: If the result is invalid
    """
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)
    return result.sanitized_value
