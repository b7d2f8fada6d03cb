"""Custom exceptions for blueprint."""


class BlueprintError(Exception):
    """Base exception for all blueprint errors.

    The CLI reports any BlueprintError as a one-line error and exits
    with status 1.
    """


class InvalidMenuOptionsError(BlueprintError, ValueError):
    """Menu options are not a non-empty sequence of (Enum key, label) pairs."""

    def __init__(self, options):
        self.options = options
        super().__init__(
            f"options must be a non-empty sequence of (Enum key, str label) pairs, got: {options!r}"
        )


class UnknownChoiceError(BlueprintError, ValueError):
    """An answer holds a value the layout planner has no files for."""

    def __init__(self, field_name, value):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Unknown {field_name}: {value!r}")


class TemplateNotFoundError(BlueprintError):
    """A layout entry points at a template that is not packaged."""

    def __init__(self, template_id, source, destination):
        self.template_id = template_id
        self.source = source
        self.destination = destination
        super().__init__(
            f"No template {source!r} for {template_id!r} (destination {destination})"
        )


class RuntimeManifestError(BlueprintError):
    """The packaged Databricks runtime manifest is missing or incomplete."""

    def __init__(self, message, resource):
        self.resource = resource
        super().__init__(f"{message} ({resource})")
