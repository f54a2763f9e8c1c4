"""Stylesheet functions that pull Python data into a compilation.

Register ``sass_functions`` with the engine to make ``require()`` available::

    $tokens: require("design/tokens.json", $parse-unquoted-strings: true);
    .button { color: map-get($tokens, colors, primary); }
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import json
import logging
import re
import tomllib
from collections.abc import Callable
from concurrent.futures import Future
from pathlib import Path
from types import ModuleType
from typing import Any

from sasscast.convert import from_sass, to_sass
from sasscast.engine.functions import SassFunction
from sasscast.errors import ModuleResolutionError, PropertyPathError
from sasscast.futures import then
from sasscast.model import SassList, SassNull, Value
from sasscast.options import ToSassOptions
from sasscast.text import get_attr

logger = logging.getLogger(__name__)

__all__ = ["load_module", "require", "sass_functions"]

_DATA_SUFFIXES = (".json", ".toml", ".py")
_ATTRIBUTE_RE = re.compile(r"^(?P<target>.+?):(?P<attr>[A-Za-z_][A-Za-z0-9_.]*)$")


class _NotFound(Exception):
    """A candidate did not resolve; the next one should be tried."""


# ---------------------------------------------------------------------------
# Module acquisition
# ---------------------------------------------------------------------------


def _defined_in(module: ModuleType, value: Any) -> bool:
    if inspect.ismodule(value):
        return False
    if inspect.isclass(value) or inspect.isroutine(value):
        return getattr(value, "__module__", None) == module.__name__
    return type(value).__module__ != "__future__"


def _public_namespace(module: ModuleType) -> dict[str, Any]:
    names = getattr(module, "__all__", None)
    if names is None:
        names = [
            name
            for name, value in vars(module).items()
            if not name.startswith("_") and _defined_in(module, value)
        ]
    return {name: getattr(module, name) for name in names}


def _exec_file(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise _NotFound(str(path))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _load_file(path: Path) -> Any:
    if not path.is_file():
        raise _NotFound(str(path))
    logger.debug("Loading data file %s", path)
    if path.suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    if path.suffix == ".toml":
        return tomllib.loads(path.read_text(encoding="utf-8"))
    return _exec_file(path)


def _import(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as exc:
        # Only a miss on the requested module (or a parent package) counts as
        # "not found"; a missing dependency inside it is a real failure.
        if exc.name is not None and (name == exc.name or name.startswith(exc.name + ".")):
            raise _NotFound(name) from exc
        raise


def _resolve(candidate: str, is_path: bool) -> Any:
    if is_path:
        return _load_file(Path(candidate))
    return _import(candidate)


def load_module(name: str) -> Any:
    """Load Python data by module name or file path.

    ``name`` may be a ``.json``/``.toml``/``.py`` path or a dotted module
    path, optionally followed by ``:attribute`` to select one object from it.
    Names starting with ``.`` or containing ``/`` without a suffix (``./theme``)
    refer to ``.py`` files.
    The literal name is tried first, then the same name relative to the
    current working directory.  Modules without an attribute selector yield
    their public namespace as a dict.

    Raises ModuleResolutionError when nothing resolves.  Errors raised while
    loading a module that was found propagate unchanged.
    """
    target, attr = name, None
    match = _ATTRIBUTE_RE.match(name)
    if match is not None:
        target, attr = match.group("target"), match.group("attr")

    cwd = Path.cwd()
    is_path = target.endswith(_DATA_SUFFIXES)
    if not is_path and (target.startswith(".") or "/" in target):
        # ./theme and lib/theme name Python files, never importable modules.
        target += ".py"
        is_path = True
    if is_path:
        candidates = [target, str(cwd / target)]
    else:
        candidates = [target, str(cwd / (target.replace(".", "/") + ".py"))]

    for index, candidate in enumerate(candidates):
        try:
            loaded = _resolve(candidate, is_path or index > 0)
        except _NotFound:
            logger.debug("Module candidate %s not found", candidate)
            continue
        logger.info("Loaded module %s from %s", name, candidate)
        break
    else:
        raise ModuleResolutionError(name)

    if attr is not None:
        for step in attr.split("."):
            if not hasattr(loaded, step):
                raise PropertyPathError(attr.split("."), step)
            loaded = getattr(loaded, step)
        return loaded
    if isinstance(loaded, ModuleType):
        return _public_namespace(loaded)
    return loaded


# ---------------------------------------------------------------------------
# require()
# ---------------------------------------------------------------------------


def _quote_option(value: Value) -> str | None:
    if isinstance(value, SassNull):
        return None
    text = value.assert_string("quotes").value
    return '"' if text == '"' else "'"


def _resolve_option(value: Value) -> bool | list[Any]:
    if isinstance(value, SassList) and len(value) > 0:
        return from_sass(value)
    return value.is_truthy


def require(args: list[Value], *, loader: Callable[[str], Any] = load_module) -> Value | Future:
    """Load a module and convert it (or a nested property of it) to a value.

    Positional arguments follow the registered signature: module name,
    property path, parse-unquoted-strings, resolve-functions, quotes.
    """
    module_arg, properties_arg, parse_arg, resolve_arg, quotes_arg = args
    module_name = module_arg.assert_string("module").value
    properties = from_sass(properties_arg.as_list) if properties_arg.real_null is not None else []
    resolve_functions = _resolve_option(resolve_arg)
    options = ToSassOptions(
        parse_unquoted_strings=parse_arg.is_truthy,
        resolve_functions=resolve_functions,
        quote_char=_quote_option(quotes_arg),
    )

    def convert(data: Any) -> Value | Future:
        if properties:
            data = get_attr(data, properties)
        return to_sass(data, options)

    module = loader(module_name)
    if options.resolves_functions and callable(module):
        module = module()
    if isinstance(module, Future):
        return then(module, convert)
    return convert(module)


sass_functions: dict[str, SassFunction] = {
    "require($module, $properties: (), $parse-unquoted-strings: false, "
    "$resolve-functions: false, $quotes: \"'\")": require,
}
