import unittest
import shutil
from pathlib import Path

from font_booklet.core.storage import Storage

class TestStorage(unittest.TestCase):
    def setUp(self):
        # Setup temporary test environment
        self.test_dir = Path("test_storage_env")
        self.test_dir.mkdir(exist_ok=True)
        self.db_path = self.test_dir / "defaults.db"
        self.storage = Storage(str(self.db_path))

    def tearDown(self):
        # Cleanup
        if self.test_dir.exists():
            try:
                shutil.rmtree(self.test_dir)
            except PermissionError:
                pass # Sometimes windows holds lock

    def test_set_and_get_value(self):
        self.assertIsNone(self.storage.get_value("SampleText"))
        self.assertEqual(self.storage.get_value("SampleText", "fallback"), "fallback")

        self.storage.set_value("SampleText", "Hello")
        self.assertEqual(self.storage.get_value("SampleText"), "Hello")

        # Overwrite
        self.storage.set_value("SampleText", "")
        self.assertEqual(self.storage.get_value("SampleText", "fallback"), "")

    def test_keys_without_payload(self):
        self.storage.add_keys(["k1", "k2"])
        self.assertEqual(self.storage.keys_with_prefix("k1"), ["k1"])
        self.assertIsNone(self.storage.get_value("k1"))
        self.assertEqual(sorted(self.storage.keys_with_prefix("k")), ["k1", "k2"])

        self.storage.remove_keys(["k1", "missing"])
        self.assertEqual(self.storage.keys_with_prefix("k"), ["k2"])

    def test_prefix_is_literal(self):
        self.storage.add_keys(["a_b", "axb", "a_", "b_a"])
        self.assertEqual(sorted(self.storage.keys_with_prefix("a_")), ["a_", "a_b"])
        self.assertEqual(self.storage.keys_with_prefix("%"), [])

    def test_empty_batches_are_noops(self):
        self.storage.add_keys([])
        self.storage.remove_keys([])
        self.assertEqual(self.storage.keys_with_prefix(""), [])

    def test_data_survives_reopen(self):
        self.storage.set_value("SampleText", "Sphinx")
        self.storage.add_keys(["BookmarkedMember Futura"])

        reopened = Storage(str(self.db_path))
        self.assertEqual(reopened.get_value("SampleText"), "Sphinx")
        self.assertEqual(reopened.keys_with_prefix("BookmarkedMember "), ["BookmarkedMember Futura"])

if __name__ == '__main__':
    unittest.main()
