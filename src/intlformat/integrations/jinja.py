"""Jinja2 registration of the IntlExtension filters and functions.

``install`` copies ``IntlExtension.get_filters()`` into ``env.filters`` and
``IntlExtension.get_functions()`` into ``env.globals``. With
``locale_variable`` set, every callable taking a ``locale`` argument reads
its default locale from that template context variable, so a template
rendered with ``locale="fr"`` formats in French without passing it to each
filter.

Example:
    >>> import jinja2
    >>> from intlformat import IntlExtension
    >>> env = jinja2.Environment()
    >>> ext = install(env, IntlExtension(), locale_variable="locale")
    >>> env.from_string("{{ 'FR'|country_name }}").render(locale="de")
    'Frankreich'

Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from functools import wraps

import jinja2

from intlformat.extension import IntlExtension

__all__ = ["install"]

logger = logging.getLogger(__name__)


def _with_context_locale(
    func: Callable[..., object], variable: str
) -> Callable[..., object]:
    """Wrap func so an omitted locale comes from the template context."""
    signature = inspect.signature(func)
    if "locale" not in signature.parameters:
        return func

    @jinja2.pass_context
    @wraps(func)
    def wrapper(ctx: jinja2.runtime.Context, *args: object, **kwargs: object) -> object:
        bound = signature.bind_partial(*args, **kwargs)
        if bound.arguments.get("locale") is None:
            locale = ctx.get(variable)
            if locale is not None:
                bound.arguments["locale"] = str(locale)
        return func(*bound.args, **bound.kwargs)

    return wrapper


def install(
    env: jinja2.Environment,
    extension: IntlExtension | None = None,
    *,
    locale_variable: str | None = None,
) -> IntlExtension:
    """Register filters and functions on a Jinja2 environment.

    Args:
        env: Environment to extend; existing entries with the same names
            are replaced
        extension: Facade to expose (default: a new ``IntlExtension()``)
        locale_variable: Context variable holding the default locale, or
            None to use the facade's default locale

    Returns:
        The installed facade, for cache management
    """
    ext = extension or IntlExtension()
    filters = ext.get_filters()
    functions = ext.get_functions()
    if locale_variable is not None:
        filters = {name: _with_context_locale(f, locale_variable) for name, f in filters.items()}
        functions = {
            name: _with_context_locale(f, locale_variable) for name, f in functions.items()
        }
    env.filters.update(filters)
    env.globals.update(functions)
    logger.debug(
        "Installed %d filters and %d functions on %r", len(filters), len(functions), env
    )
    return ext
