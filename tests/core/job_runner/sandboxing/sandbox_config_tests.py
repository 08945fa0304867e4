import datetime
import sys
import unittest

from parameterized import parameterized

from algo_exercises.core.job_runner.command_runners import base
from algo_exercises.core.job_runner.command_runners import subprocess_runner
from algo_exercises.core.job_runner.sandboxing import sandbox_config


class TestSandboxConfig(unittest.TestCase):

    def test_empty_config_has_no_preexec_fn(self):
        config = sandbox_config.SandboxConfig()
        self.assertTrue(config.is_empty)
        self.assertIsNone(config.to_preexec_fn())

    @parameterized.expand([
        ({"max_memory_bytes": 0},),
        ({"max_memory_bytes": -1},),
        ({"max_cpu_seconds": 0},),
    ])
    def test_non_positive_limits_are_rejected(self, init_args):
        with self.assertRaisesRegex(ValueError, "must be positive"):
            sandbox_config.SandboxConfig(**init_args)

    @unittest.skipUnless(sys.platform.startswith("linux"), "Linux only")
    def test_memory_limit_is_applied_in_child(self):
        limit = 512 * 1024 * 1024
        config = sandbox_config.SandboxConfig(max_memory_bytes=limit,
                                              max_cpu_seconds=10)
        preexec_fn = config.to_preexec_fn()
        self.assertTrue(callable(preexec_fn))

        runner = subprocess_runner.SubprocessCommandRunner(preexec_fn=preexec_fn)
        result = runner.run([
            sys.executable, "-c",
            "import resource; print(resource.getrlimit(resource.RLIMIT_AS)[0])"
        ])
        self.assertEqual(result.returncode, 0, msg=result.stderr_text)
        self.assertEqual(int(result.stdout.strip()), limit)

    @unittest.skipUnless(sys.platform.startswith("linux"), "Linux only")
    def test_cpu_limit_stops_busy_child(self):
        config = sandbox_config.SandboxConfig(max_cpu_seconds=1)
        runner = subprocess_runner.SubprocessCommandRunner(
            preexec_fn=config.to_preexec_fn())
        result = runner.run([sys.executable, "-c", "while True: pass"],
                            timeout=datetime.timedelta(seconds=30))

        self.assertEqual(result.status, base.CommandStatus.COMPLETED)
        self.assertLess(result.returncode, 0)


if __name__ == "__main__":
    unittest.main()
