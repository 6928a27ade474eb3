import os
import tempfile
import unittest
from linkfinder.utils.file_probe import file_exists, all_files_exist, find_first_dir_index

class TestFileProbe(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name
        for name in ("libssl.a", "libcrypto.a"):
            with open(os.path.join(self.dir, name), "w") as f:
                f.write("")
        os.makedirs(os.path.join(self.dir, "libz.a"))

    def tearDown(self):
        self.tmp.cleanup()

    def test_file_exists_regular_file(self):
        self.assertTrue(file_exists(self.dir, "libssl.a"))

    def test_file_exists_missing(self):
        self.assertFalse(file_exists(self.dir, "libpcre.a"))

    def test_file_exists_rejects_directory(self):
        self.assertFalse(file_exists(self.dir, "libz.a"))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_file_exists_rejects_symlink_to_directory(self):
        target = os.path.join(self.dir, "real_dir")
        os.makedirs(target)
        try:
            os.symlink(target, os.path.join(self.dir, "linked.a"))
        except OSError:
            self.skipTest("cannot create symlinks here")
        self.assertFalse(file_exists(self.dir, "linked.a"))

    def test_file_exists_missing_directory(self):
        self.assertFalse(file_exists(os.path.join(self.dir, "nope"), "libssl.a"))

    def test_all_files_exist(self):
        self.assertTrue(all_files_exist(self.dir, ["libssl.a", "libcrypto.a"]))
        self.assertFalse(all_files_exist(self.dir, ["libssl.a", "libpcre.a"]))

    def test_all_files_exist_matches_individual_checks(self):
        names = ["libssl.a", "libcrypto.a", "libz.a", "libpcre.a"]
        for size in range(len(names) + 1):
            subset = names[:size]
            expected = all(file_exists(self.dir, n) for n in subset)
            self.assertEqual(all_files_exist(self.dir, subset), expected, subset)

    def test_all_files_exist_empty_set_is_true(self):
        self.assertTrue(all_files_exist(self.dir, []))

    def test_find_first_dir_index(self):
        with tempfile.TemporaryDirectory() as other:
            dirs = ["", other, self.dir]
            self.assertEqual(find_first_dir_index(dirs, ["libssl.a"]), 2)
            self.assertIsNone(find_first_dir_index(dirs, ["libpcre.a"]))

if __name__ == "__main__":
    unittest.main()
