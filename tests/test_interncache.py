import unittest
import gc
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from barcodedigits.typing import InternCache, Retention

class Entry:

    def __init__(self, key: int) -> None:
        self.key = key

class TestInternCache(unittest.TestCase):

    def setUp(self) -> None:
        self.caches = [InternCache("strong"), InternCache("weak", retention=Retention.WEAK)]
        self.calls = 0

    def build(self, key: int) -> Entry:
        self.calls += 1
        return Entry(key)

    def test_miss_and_hit(self):
        for cache in self.caches:
            self.calls = 0
            first = cache.get_or_build(1, lambda: self.build(1))
            second = cache.get_or_build(1, lambda: self.build(1))
            self.assertIs(first, second)
            self.assertEqual(self.calls, 1)
            self.assertIn(1, cache)
            self.assertEqual(len(cache), 1)
            self.assertEqual(cache.values(), [first])

            other = cache.get_or_build(2, lambda: self.build(2))
            self.assertIsNot(first, other)
            self.assertEqual(self.calls, 2)

    def test_failing_builder(self):
        def fail() -> Entry:
            raise ValueError("invalid")

        for cache in self.caches:
            self.assertRaises(ValueError, cache.get_or_build, 3, fail)
            self.assertNotIn(3, cache)
            self.assertEqual(len(cache), 0)
            entry = cache.get_or_build(3, lambda: self.build(3))
            self.assertEqual(entry.key, 3)

    def test_strong_retention(self):
        cache = self.caches[0]
        entry = cache.get_or_build(4, lambda: self.build(4))
        del entry
        gc.collect()
        self.assertIn(4, cache)

    def test_weak_retention(self):
        cache = self.caches[1]
        entry = cache.get_or_build(4, lambda: self.build(4))
        self.assertIn(4, cache)
        del entry
        gc.collect()
        self.assertNotIn(4, cache)
        rebuilt = cache.get_or_build(4, lambda: self.build(4))
        self.assertEqual(rebuilt.key, 4)
        self.assertEqual(self.calls, 2)

    def test_concurrent_miss(self):
        workers = 8
        barrier = threading.Barrier(workers)
        lock = threading.Lock()

        def slow_build() -> Entry:
            with lock:
                self.calls += 1
            time.sleep(0.01)
            return Entry(5)

        for cache in self.caches:
            self.calls = 0

            def lookup(_: int) -> Entry:
                barrier.wait()
                return cache.get_or_build(5, slow_build)

            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(lookup, range(workers)))
            self.assertEqual(self.calls, 1)
            self.assertTrue(all(r is results[0] for r in results))

    def test_logging(self):
        cache = self.caches[0]
        with self.assertLogs("barcodedigits.interncache", level="DEBUG") as logs:
            cache.get_or_build(6, lambda: self.build(6))
        self.assertEqual(len(logs.records), 1)
        self.assertIn("strong cache", logs.output[0])

    def test_str(self):
        cache = self.caches[1]
        entry = cache.get_or_build(7, lambda: self.build(7))
        self.assertEqual(str(cache), "InternCache(name=weak,retention=WEAK,size=1)")
        self.assertEqual(str(self.caches[0]), "InternCache(name=strong,retention=STRONG,size=0)")
        self.assertEqual(entry.key, 7)

if __name__ == '__main__':
    unittest.main()
