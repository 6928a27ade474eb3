import json
import os
import shutil
import tempfile
import unittest
from click.testing import CliRunner
from linkfinder import config
from linkfinder.context import ResolverContext
from linkfinder.main import cli
from fake_compiler import FakeCompiler, GNU_INCLUDE_ARGS, include_dirs_output, search_dirs_output

class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        self.lib_dir = os.path.join(self.test_dir, "lib")
        self.include_dir = os.path.join(self.test_dir, "include")
        os.makedirs(self.lib_dir)
        os.makedirs(self.include_dir)
        self.compiler = FakeCompiler({
            ("-print-search-dirs",): search_dirs_output(self.lib_dir),
            GNU_INCLUDE_ARGS: include_dirs_output(self.include_dir),
        })

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def touch(self, *names):
        for name in names:
            with open(os.path.join(self.lib_dir, name), "w") as f:
                f.write("")

    def invoke(self, args, environ=None):
        resolver_ctx = ResolverContext(runner=self.compiler, environ=environ or {}, root=self.test_dir)
        return self.runner.invoke(cli, ["--path", self.test_dir] + args,
                                  obj={"resolver_context": resolver_ctx})

    def test_resolve_text(self):
        self.touch("libssl.so", "libcrypto.so")
        result = self.invoke(["resolve", "openssl"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("openssl:", result.output)
        self.assertIn("link tokens: ssl crypto", result.output)

    def test_resolve_json(self):
        self.touch("libpcre2-8.a")
        result = self.invoke(["resolve", "pcre2", "--json"])
        self.assertEqual(result.exit_code, 0)
        spec = json.loads(result.output[result.output.index("{"):])
        self.assertEqual(spec["logical_name"], "pcre2")
        self.assertEqual(spec["link_tokens"], ["pcre2-8"])
        self.assertEqual(spec["defines"], {"PCRE2_STATIC": None, "PCRE2_CODE_UNIT_WIDTH": "8"})
        self.assertIsNone(spec["override"])

    def test_resolve_not_found_exit_code(self):
        result = self.invoke(["resolve", "pcre"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("pcre", result.output)

    def test_resolve_best_effort(self):
        result = self.invoke(["resolve", "pcre", "--best-effort"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("link tokens: pcre", result.output)

    def test_resolve_uses_override(self):
        with open(os.path.join(self.test_dir, "local-zlib.toml"), "w") as f:
            f.write('link_tokens = ["zlibstatic"]\n')
        result = self.invoke(["resolve", "zlib"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("override:", result.output)
        self.assertIn("link tokens: zlibstatic", result.output)
        self.assertEqual(self.compiler.calls, [])

    def test_resolve_reads_toolchain_from_config(self):
        config.save_config({"toolchain": {"compiler": "vc", "compiler_version": "15"}}, path=self.test_dir)
        result = self.invoke(["resolve", "platform"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("link tokens: wsock32 ws2_32", result.output)

    def test_resolve_unknown_family(self):
        result = self.invoke(["resolve", "libfoo"])
        self.assertNotEqual(result.exit_code, 0)

    def test_mangle(self):
        result = self.invoke(["mangle", "boost_system", "--version", "106600",
                              "--compiler", "vc", "--compiler-version", "15"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "libboost_system-vc141-mt-x64-1_66")

    def test_mangle_dotted_version(self):
        result = self.invoke(["mangle", "boost_system", "--version", "1.66.1", "--compiler", "vc",
                              "--compiler-version", "15", "--variant", "shared", "--bits", "32"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "boost_system-vc141-mt-x32-1_66_1")

    def test_mangle_unsupported_toolset(self):
        result = self.invoke(["mangle", "boost_system", "--version", "106600",
                              "--compiler", "vc", "--compiler-version", "12"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("toolset not supported", result.output)

    def test_dirs(self):
        result = self.invoke(["dirs"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Library search directories:", result.output)
        self.assertIn(self.lib_dir, result.output)
        self.assertIn(self.include_dir, result.output)

    def test_dirs_libs_only(self):
        result = self.invoke(["dirs", "--libs"])
        self.assertEqual(result.exit_code, 0)
        self.assertNotIn("Header search directories:", result.output)

    def test_check(self):
        self.touch("libz.so")
        result = self.invoke(["check"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("zlib: available", result.output)
        self.assertIn("asio: available", result.output)
        self.assertIn("pcre: not found", result.output)
        self.assertIn("boost: not found", result.output)

    def test_config_view_not_found(self):
        """Test that viewing a non-existent config returns an error."""
        result = self.invoke(["config", "view"])
        self.assertIn("Error: No linkfinder.toml found.", result.output)

    def test_config_view(self):
        """Test that viewing a config prints its content."""
        config.save_config({"toolchain": {"compiler": "clang"}}, path=self.test_dir)
        result = self.invoke(["config", "view"])
        with open(os.path.join(self.test_dir, config.CONFIG_FILE), "r") as f:
            self.assertEqual(result.output.strip(), f.read().strip())

if __name__ == "__main__":
    unittest.main()
