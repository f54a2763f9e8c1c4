"""sasscast - convert values between Python and Sass-style stylesheets."""

from sasscast.bridge import load_module, require, sass_functions
from sasscast.convert import NumberWithUnits, from_sass, to_sass
from sasscast.engine import CompileResult, compile_file, compile_string
from sasscast.errors import (
    CompileError,
    ModuleResolutionError,
    PropertyPathError,
    SassTypeError,
    SasscastError,
)
from sasscast.options import FromSassOptions, ToSassOptions
from sasscast.sniff import parse_string
from sasscast.text import is_quoted, quote_string, unquote_string

__version__ = "0.1.0"

# Direction-neutral names for the two converters.
to_foreign = to_sass
to_host = from_sass

__all__ = [
    "__version__",
    # conversion
    "to_sass",
    "from_sass",
    "to_foreign",
    "to_host",
    "ToSassOptions",
    "FromSassOptions",
    "NumberWithUnits",
    "parse_string",
    # text
    "is_quoted",
    "quote_string",
    "unquote_string",
    # engine
    "compile_string",
    "compile_file",
    "CompileResult",
    # import bridge
    "sass_functions",
    "require",
    "load_module",
    # errors
    "SasscastError",
    "CompileError",
    "SassTypeError",
    "ModuleResolutionError",
    "PropertyPathError",
]
