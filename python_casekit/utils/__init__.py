from .arithmetic import add_numbers
from .logger import JsonFormatter, setup_logging
from .string_case import (
	convert_case,
	split_words,
	to_camel_case,
	to_dot_case,
	to_kebab_case,
)
from common.models import CaseStyle

__all__ = [
	"CaseStyle",
	"JsonFormatter",
	"add_numbers",
	"convert_case",
	"setup_logging",
	"split_words",
	"to_camel_case",
	"to_dot_case",
	"to_kebab_case",
]
