import os
import tempfile
import threading
import time
import unittest
from unittest.mock import patch

from backend import dependencies
from backend.config import Settings
from backend.store import JsonPostStore


class SingletonTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.settings = Settings(
            posts_file=os.path.join(self._tmp.name, "posts.json"), session_secret=None
        )
        patchers = [
            patch("backend.dependencies.get_settings", return_value=self.settings),
            patch.object(dependencies, "_post_store", None),
            patch.object(dependencies, "_session_config", None),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self):
        self._tmp.cleanup()

    def _call_together(self, factory, workers=8):
        barrier = threading.Barrier(workers)
        results = []

        def run():
            barrier.wait()
            results.append(factory())

        threads = [threading.Thread(target=run) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return results

    def test_post_store_is_built_once_under_concurrent_first_use(self):
        def slow_store(path):
            time.sleep(0.05)
            return JsonPostStore(path)

        with patch("backend.dependencies.JsonPostStore", side_effect=slow_store) as ctor:
            stores = self._call_together(dependencies.get_post_store)
        self.assertEqual(ctor.call_count, 1)
        self.assertTrue(all(store is stores[0] for store in stores))

    def test_session_secret_is_generated_once(self):
        configs = self._call_together(dependencies.get_session_config)
        self.assertEqual({config.secret for config in configs}, {configs[0].secret})
        self.assertEqual(len(configs[0].secret), 64)


if __name__ == "__main__":
    unittest.main()
