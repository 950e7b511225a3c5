"""monthpick — bounded, localizable year-month input field.

Parses free-form text into year-month values and formats them back,
using a canonical pattern plus ordered fallbacks, locale month names,
and two- or four-digit years.
"""

from monthpick.domain.errors import ConfigurationError, ParseFailure
from monthpick.domain.formats import FormatSpec
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.domain.yearmonth import YearMonth
from monthpick.services.engine import format_value, parse_text
from monthpick.services.events import ChangeKind, OpenedChangeEvent, Origin, ValueChangeEvent
from monthpick.services.field import FieldState, FieldStatus, MonthField
from monthpick.services.validation import InvalidReason, RangeBounds, validate_range

__version__ = "0.1.0"

__all__ = [
    "ChangeKind",
    "ConfigurationError",
    "FieldState",
    "FieldStatus",
    "FormatSpec",
    "InvalidReason",
    "LocaleVocabulary",
    "MonthField",
    "OpenedChangeEvent",
    "Origin",
    "ParseFailure",
    "RangeBounds",
    "ValueChangeEvent",
    "YearMonth",
    "__version__",
    "format_value",
    "parse_text",
    "validate_range",
]
