"""Registry of report views.

A view is any module under pixel_codec/views/ with a module-level `view`
object. Modules are found with pkgutil on first use and cached by view name;
adding a view means dropping a file into the package, nothing else.
"""

import importlib
import pkgutil

import pixel_codec.views
from pixel_codec.core.types import View

_views: dict[str, View] = {}


def _view_modules() -> list[str]:
    return sorted(
        name for _finder, name, _ispkg in pkgutil.iter_modules(pixel_codec.views.__path__) if not name.startswith('_')
    )


def discover() -> dict[str, View]:
    """Import every view module once and return views keyed by name."""
    if not _views:
        for name in _view_modules():
            module = importlib.import_module(f'{pixel_codec.views.__name__}.{name}')
            candidate = getattr(module, 'view', None)
            if isinstance(candidate, View):
                _views[candidate.name] = candidate
    return _views


def get(name: str) -> View:
    views = discover()
    try:
        return views[name]
    except KeyError:
        raise KeyError(f'Unknown view: {name}. Available: {", ".join(sorted(views))}') from None


def all_views() -> dict[str, View]:
    return discover()
