"""Declarative validation and transformation pipelines for untrusted input.

This package provides chainable field validators that:
- Coerce form and API input to the expected kind
- Run validation steps fail-fast, in declaration order
- Apply transformations in declaration order, switching kinds as needed
- Compose into record and list validators that collect errors per key/index
- Combine whole validators with any_of / all_of / not_

Example:
    ```python
    from dataknobs_fieldchain import flatten_errors, integer, list_, mapping, string

    schema = mapping({
        "name": string().pipe(str.strip).nullify_empty().required(),
        "age": integer().coerce().min(18),
        "tags": list_().coerce().items(string().not_empty()),
    })

    accepted, data, errors = schema.try_validate(payload)
    if not accepted:
        for path, message in flatten_errors(errors):
            print(f"{path}: {message}")
    ```
"""

from .collection import ListValidator
from .combinators import MixedValidator, all_of, any_of, not_
from .exceptions import ErrorTree, FieldValidationError, flatten_errors
from .factory import (
    Validator,
    boolean,
    float_,
    integer,
    list_,
    mapping,
    object_,
    string,
)
from .field import FieldValidator, OneOfMixin
from .kinds import Kind
from .predicates import (
    CrossItemCheck,
    PredicateRegistry,
    ValidationStep,
    predicates,
)
from .record import MappingValidator, ObjectValidator, SchemaValidator
from .result import ValidationResult
from .scalars import (
    BooleanValidator,
    FloatValidator,
    IntegerValidator,
    NumericConstraintsMixin,
    StringValidator,
)
from .settings import SettingsManager, settings

__version__ = "0.1.0"

__all__ = [
    # Results and errors
    "ValidationResult",
    "FieldValidationError",
    "ErrorTree",
    "flatten_errors",
    # Factories
    "Validator",
    "string",
    "integer",
    "float_",
    "boolean",
    "list_",
    "mapping",
    "object_",
    "any_of",
    "all_of",
    "not_",
    # Validators
    "FieldValidator",
    "OneOfMixin",
    "NumericConstraintsMixin",
    "StringValidator",
    "IntegerValidator",
    "FloatValidator",
    "BooleanValidator",
    "ListValidator",
    "SchemaValidator",
    "MappingValidator",
    "ObjectValidator",
    "MixedValidator",
    "Kind",
    # Predicates
    "ValidationStep",
    "CrossItemCheck",
    "PredicateRegistry",
    "predicates",
    # Settings
    "SettingsManager",
    "settings",
]
