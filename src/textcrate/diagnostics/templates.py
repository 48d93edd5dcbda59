"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def pattern_empty() -> Diagnostic:
        """Pattern is None, empty or whitespace only.

        Returns:
            Diagnostic for PATTERN_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY,
            message="Pattern cannot be empty",
            hint="Describe the event the message reports",
        )

    @staticmethod
    def pattern_too_generic(pattern: str) -> Diagnostic:
        """Pattern is nothing but a single placeholder.

        Args:
            pattern: The offending pattern

        Returns:
            Diagnostic for PATTERN_TOO_GENERIC
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_GENERIC,
            message="Pattern too generic",
            hint=f"Add text around the placeholder in '{pattern.strip()}'",
        )

    @staticmethod
    def placeholder_count_mismatch(parameter_count: int, placeholder_count: int) -> Diagnostic:
        """Number of parameters differs from number of placeholders.

        Args:
            parameter_count: Number of declared parameter types
            placeholder_count: Number of unescaped placeholders in the pattern

        Returns:
            Diagnostic for PLACEHOLDER_COUNT_MISMATCH
        """
        msg = f"Parameter count {parameter_count} does not match the pattern: {placeholder_count}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_COUNT_MISMATCH,
            message=msg,
            hint="Add or remove placeholders so they match the parameters",
        )

    @staticmethod
    def required_input_missing(what: str) -> Diagnostic:
        """A required argument was None.

        Args:
            what: Human-readable name of the missing input

        Returns:
            Diagnostic for REQUIRED_INPUT_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.REQUIRED_INPUT_MISSING,
            message=f"{what} cannot be None",
        )

    @staticmethod
    def formatter_not_found(name: str, available: list[str]) -> Diagnostic:
        """Formatter name is not registered.

        Args:
            name: Requested formatter name
            available: Registered formatter names

        Returns:
            Diagnostic for FORMATTER_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_FOUND,
            message=f"Formatter '{name}' is not registered",
            hint=f"Registered formatters: {', '.join(sorted(available)) or 'none'}",
            subject=name,
        )

    @staticmethod
    def formatter_not_instantiable(spec: object, reason: str) -> Diagnostic:
        """Formatter constructor failed or returned something unusable.

        Args:
            spec: Formatter name or constructor
            reason: Failure description

        Returns:
            Diagnostic for FORMATTER_NOT_INSTANTIABLE
        """
        name = getattr(spec, "__qualname__", None) or repr(spec)
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_INSTANTIABLE,
            message=f"Formatter {name} could not be instantiated: {reason}",
            hint="Formatter constructors must accept no arguments",
            subject=name,
        )

    @staticmethod
    def duplicate_message_id(type_name: str, message_id: int, members: list[str]) -> Diagnostic:
        """Two call sites of one repository share a message id.

        Args:
            type_name: Repository type name
            message_id: The repeated id
            members: Call sites declaring it

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=f"Message id {message_id} is used by {', '.join(members)}",
            hint="Message ids must be unique within a repository",
            subject=type_name,
        )

    @staticmethod
    def duplicate_call_site(type_name: str, member: str) -> Diagnostic:
        """Call site declared twice on one repository.

        Args:
            type_name: Repository type name
            member: Repeated member name

        Returns:
            Diagnostic for DUPLICATE_CALL_SITE
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_CALL_SITE,
            message=f"Call site '{member}' is already declared",
            subject=f"{type_name}#{member}",
        )

    @staticmethod
    def invalid_declaration(subject: str, reason: str) -> Diagnostic:
        """Declaration value has the wrong type or shape.

        Args:
            subject: What was being declared
            reason: What is wrong with it

        Returns:
            Diagnostic for INVALID_DECLARATION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_DECLARATION,
            message=f"Invalid {subject}: {reason}",
            subject=subject,
        )

    @staticmethod
    def unsupported_return_type(call_site: str, return_type: object) -> Diagnostic:
        """Call site declares a return type other than Message or str.

        Args:
            call_site: Call site identity (type#member)
            return_type: The declared return type

        Returns:
            Diagnostic for UNSUPPORTED_RETURN_TYPE
        """
        declared = getattr(return_type, "__qualname__", None) or repr(return_type)
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_RETURN_TYPE,
            message=f"Message method must return textcrate.Message (or str), not {declared}",
            hint="Annotate the call site with '-> Message' or '-> str'",
            subject=call_site,
        )

    @staticmethod
    def call_site_not_found(type_name: str, member: str) -> Diagnostic:
        """No call site of that name in the repository.

        Args:
            type_name: Repository type name
            member: Requested member name

        Returns:
            Diagnostic for CALL_SITE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.CALL_SITE_NOT_FOUND,
            message=f"Repository {type_name} has no call site '{member}'",
            subject=f"{type_name}#{member}",
        )
