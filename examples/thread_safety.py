"""Thread Safety Example - Sharing one IntlExtension across threads.

Thread Safety:
    IntlExtension is safe to share. Formatter caches are guarded by an
    RLock; number formatters are reconfigured per call while that lock is
    held, and date formatters are immutable once built.

Demonstrates:
1. Concurrent formatting through one shared facade
2. Cache statistics after a concurrent burst
3. Bounded caches for long-running processes with many locales

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

from intlformat import IntlConfig, IntlExtension

LOCALES = ("en", "de", "fr", "es", "it", "ja", "lv")


def example_1_shared_extension() -> None:
    """Example 1: Many threads formatting through one facade."""
    print("=" * 60)
    print("Example 1: Shared IntlExtension")
    print("=" * 60)

    ext = IntlExtension(config=IntlConfig(default_locale="en"))

    def worker(index: int) -> str:
        locale = LOCALES[index % len(LOCALES)]
        amount = ext.format_currency(index * 1000.5, "EUR", locale=locale)
        when = ext.format_date("2020-02-22", "long", locale=locale)
        return f"[{locale}] {amount} / {when}"

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(worker, i) for i in range(len(LOCALES) * 3)]
        for future in as_completed(futures):
            print(f"  {future.result()}")

    stats = ext.get_cache_stats()
    print(f"\nNumber formatters built: {stats['number']['constructions']}")
    print(f"Date formatters built:   {stats['date']['constructions']}")
    # One formatter per distinct locale/options combination, regardless of thread count


def example_2_bounded_cache() -> None:
    """Example 2: Bounding the caches for processes serving many locales."""
    print("\n" + "=" * 60)
    print("Example 2: Bounded Caches")
    print("=" * 60)

    ext = IntlExtension(config=IntlConfig(default_locale="en", cache_size=4))
    for locale in LOCALES:
        ext.format_number(1234.5, locale=locale)

    stats = ext.get_cache_stats()["number"]
    print(f"size={stats['size']} maxsize={stats['maxsize']} misses={stats['misses']}")
    # Output: size=4 maxsize=4 misses=7

    ext.clear_cache()
    print(f"after clear: size={ext.get_cache_stats()['number']['size']}")
    # Output: after clear: size=0


if __name__ == "__main__":
    example_1_shared_extension()
    example_2_bounded_cache()
