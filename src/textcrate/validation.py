"""Repository validation.

Checks every declared pattern against the repository's message formatter
before any message is produced, so malformed patterns surface at startup
or in tests rather than as fallback text in production output.

Python 3.13+.
"""

import logging

from textcrate.declaration import RepositorySpec
from textcrate.diagnostics import (
    ConfigurationError,
    DiagnosticCode,
    ErrorTemplate,
    InvalidPatternError,
    PatternProblem,
    ValidationResult,
    ValidationWarning,
)
from textcrate.formatters import FormatterRegistry, validator_of
from textcrate.runtime import BlueprintFactory, find_duplicate_ids

__all__ = ["validate_repository"]

logger = logging.getLogger(__name__)


def validate_repository(
    repository: RepositorySpec,
    *,
    registry: FormatterRegistry | None = None,
) -> ValidationResult:
    """Validate the message patterns of a repository.

    Each call site with a message is validated with the resolved message
    formatter against the call site's argument types. Call sites without a
    message are reported as warnings. Duplicate message ids are reported
    as errors; patterns are not checked in that case since no formatter can
    be resolved for an invalid repository.

    Args:
        repository: Repository declaration
        registry: Registry resolving formatter names (shared registry if None)

    Returns:
        ValidationResult with one PatternProblem per rejected pattern

    Raises:
        ConfigurationError: If repository is None

    Example:
        >>> spec = repository("app.M").message("hi", 1, "Hi {} {}", arguments=(str,)).build()
        >>> validate_repository(spec).errors[0].reason
        'Parameter count 1 does not match the pattern: 2'
    """
    if repository is None:
        raise ConfigurationError(ErrorTemplate.required_input_missing("Repository"))

    duplicates = find_duplicate_ids(repository)
    if duplicates:
        errors = tuple(
            PatternProblem(
                member=member,
                message_id=message_id,
                pattern=repository.call_sites[member].message.pattern,  # type: ignore[union-attr]
                code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
                reason=ErrorTemplate.duplicate_message_id(
                    repository.type_name, message_id, members
                ).message,
            )
            for message_id, members in duplicates.items()
            for member in members
        )
        return ValidationResult(errors=errors, warnings=())

    validator = validator_of(BlueprintFactory(repository, registry=registry).message_formatter)
    errors_found: list[PatternProblem] = []
    warnings: list[ValidationWarning] = []

    for member, call_site in repository.call_sites.items():
        spec = call_site.message
        if spec is None:
            warnings.append(
                ValidationWarning(member=member, message=f"{call_site.identity} has no message")
            )
            continue
        if validator is None:
            continue
        try:
            validator.validate(spec.pattern, *call_site.argument_types)
        except InvalidPatternError as e:
            errors_found.append(
                PatternProblem(
                    member=member,
                    message_id=spec.id,
                    pattern=spec.pattern,
                    code=e.diagnostic.code if e.diagnostic is not None else None,
                    reason=str(e),
                )
            )

    logger.debug(
        "Validated %s: %d errors, %d warnings",
        repository.type_name,
        len(errors_found),
        len(warnings),
    )
    return ValidationResult(errors=tuple(errors_found), warnings=tuple(warnings))
