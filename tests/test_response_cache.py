import threading
import unittest

from infrastructure.cache.in_memory_response_cache import InMemoryResponseCache, cache_key


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryResponseCache(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.cache = InMemoryResponseCache(ttl_seconds=300, clock=self.clock)

    def test_get_after_set(self):
        self.cache.set("what time do you open", "From 8am.")
        self.assertEqual(self.cache.get("what time do you open"), "From 8am.")

    def test_missing_key(self):
        self.assertIsNone(self.cache.get("unknown"))

    def test_keys_are_case_insensitive_and_trimmed(self):
        self.cache.set("  What Time Do You Open ", "From 8am.")
        self.assertEqual(self.cache.get("what time do you open"), "From 8am.")
        self.assertEqual(cache_key("  Hello "), "hello")

    def test_set_overwrites(self):
        self.cache.set("menu", "old")
        self.clock.now += 200
        self.cache.set("menu", "new")
        self.clock.now += 200
        self.assertEqual(self.cache.get("menu"), "new")

    def test_expires_after_ttl(self):
        self.cache.set("menu", "reply")
        self.clock.now += 300
        self.assertEqual(self.cache.get("menu"), "reply")
        self.clock.now += 0.001
        self.assertIsNone(self.cache.get("menu"))
        self.assertEqual(len(self.cache), 0)

    def test_evicts_oldest_entries(self):
        cache = InMemoryResponseCache(ttl_seconds=300, max_entries=2, clock=self.clock)
        cache.set("a", "1")
        cache.set("b", "2")
        cache.get("a")
        cache.set("c", "3")
        self.assertEqual(cache.get("a"), "1")
        self.assertIsNone(cache.get("b"))
        self.assertEqual(cache.get("c"), "3")

    def test_concurrent_writers(self):
        def writer(offset: int) -> None:
            for i in range(200):
                self.cache.set(f"key-{i % 50}", f"value-{offset}")
                self.cache.get(f"key-{(i + offset) % 50}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(len(self.cache), 50)


if __name__ == "__main__":
    unittest.main()
