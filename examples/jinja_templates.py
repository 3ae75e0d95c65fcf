"""Jinja2 integration example.

Registers the IntlExtension filters and functions on a Jinja2 environment
and renders the same template in several locales, taking the locale from
the template context.

Requires the ``jinja`` extra: ``pip install intlformat[jinja]``.

Python 3.13+.
"""

from __future__ import annotations

import jinja2

from intlformat import IntlConfig, IntlExtension
from intlformat.integrations.jinja import install

TEMPLATE = """\
{{ 'FR'|country_name }} ({{ country_timezones('FR')|join(', ') }})
Total: {{ total|format_currency('EUR') }}
Discount: {{ discount|format_percent_number }}
Ordered: {{ ordered|format_date('long') }}
"""

env = jinja2.Environment(autoescape=True)
ext = install(env, IntlExtension(config=IntlConfig(default_locale="en")), locale_variable="locale")
template = env.from_string(TEMPLATE)

for locale in ("en", "de", "fr"):
    print("=" * 50)
    print(f"locale={locale}")
    print("=" * 50)
    print(
        template.render(
            locale=locale, total=1234.5, discount=0.15, ordered="2020-02-22 13:37:30"
        )
    )

# An explicit argument wins over the context variable
print(env.from_string("{{ 'FR'|country_name('es') }}").render(locale="de"))
# Output: Francia

print(ext.get_cache_stats())
