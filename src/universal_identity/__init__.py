"""Universal left identities.

``Id(op)`` is a value that every registered operation ``op`` absorbs:
``op(Id(op), x)`` returns ``x`` whatever the type of ``x``. Generic folds can
seed their accumulator with it instead of a type-specific zero, one or empty
value.
"""

from .config import RegistryConfig
from .dispatch import MethodTable
from .errors import (
    AmbiguousDispatchError,
    IdentityError,
    MaterializationError,
    NoApplicableRuleError,
    RegistrationConflictError,
    RegistrationError,
)
from .identity import Id, Identity, SpecificIdentity, identity_type, operation_tag
from .laws import left_identity_holds, violations
from .missing import Missing, missing
from .numeric import (
    AdditiveIdentity,
    MultiplicativeIdentity,
    as_float,
    as_integer,
    convert,
    one,
    zero,
)
from .operation import Operation, operation
from .ops import add_sum, mul_prod
from .registration import define, disambiguate, hasidentity, isknown
from .registry import REGISTRY, DisambiguationRecord, IdentityRecord, IdentityRegistry
from .standard import STANDARD_OPERATIONS

__all__ = [
    # Identities
    "Id",
    "Identity",
    "SpecificIdentity",
    "identity_type",
    "operation_tag",
    # Registration
    "define",
    "disambiguate",
    "hasidentity",
    "isknown",
    "operation",
    "Operation",
    # Registry
    "REGISTRY",
    "IdentityRegistry",
    "IdentityRecord",
    "DisambiguationRecord",
    "MethodTable",
    "RegistryConfig",
    "STANDARD_OPERATIONS",
    # Operations and markers
    "add_sum",
    "mul_prod",
    "missing",
    "Missing",
    # Numeric materialization
    "AdditiveIdentity",
    "MultiplicativeIdentity",
    "as_float",
    "as_integer",
    "convert",
    "zero",
    "one",
    # Laws
    "left_identity_holds",
    "violations",
    # Errors
    "IdentityError",
    "NoApplicableRuleError",
    "AmbiguousDispatchError",
    "RegistrationError",
    "RegistrationConflictError",
    "MaterializationError",
]
