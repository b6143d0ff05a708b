import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from core.config_loader import load_config, AppConfig, DEFAULT_CACHE_TTL_SECONDS


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "scorer": {"disable_checks": False},
            "cache": {
                "enabled": True,
                "directory": "/tmp/baselines",
                "redis_url": "redis://localhost:6379/0",
                "ttl_seconds": 600
            },
            "web": {"host": "127.0.0.1", "port": 9000},
            "instances": {"a": "input/a_an_example.in.txt", "b": "input/b_better_start_small.in.txt"}
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {}, clear=True):
                    config = load_config("dummy_path.yaml")
                    self.assertIsInstance(config, AppConfig)
                    self.assertEqual(config.cache.directory, "/tmp/baselines")
                    self.assertEqual(config.cache.ttl_seconds, 600)
                    self.assertEqual(config.web.port, 9000)
                    self.assertEqual(sorted(config.instances), ["a", "b"])

    def test_missing_file_gives_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config("missing.yaml")
                self.assertFalse(config.scorer.disable_checks)
                self.assertTrue(config.cache.enabled)
                self.assertIsNone(config.cache.directory)
                self.assertIsNone(config.cache.redis_url)
                self.assertEqual(config.cache.ttl_seconds, DEFAULT_CACHE_TTL_SECONDS)
                self.assertEqual(config.web.port, 8080)
                self.assertEqual(config.instances, {})

    def test_empty_file_gives_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {}, clear=True):
                    config = load_config("empty.yaml")
                    self.assertEqual(config.web.host, "0.0.0.0")

    def test_env_var_override_redis(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"REDIS_URL": "redis://env-redis:6379/1"}, clear=True):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.cache.redis_url, "redis://env-redis:6379/1")

    def test_env_var_override_cache_dir_and_checks(self):
        env = {"SCORER_CACHE_DIR": "/var/cache/scorer", "SCORER_DISABLE_CHECKS": "true"}
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, env, clear=True):
                config = load_config("missing.yaml")
                self.assertEqual(config.cache.directory, "/var/cache/scorer")
                self.assertTrue(config.scorer.disable_checks)

    def test_env_var_override_web(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"WEB_HOST": "10.0.0.1", "WEB_PORT": "9100"}, clear=True):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.web.host, "10.0.0.1")
                    self.assertEqual(config.web.port, 9100)


if __name__ == "__main__":
    unittest.main()
