import dataclasses
import os
import tempfile
import textwrap
import unittest

from gomoku_ai.config import CANDIDATE_CAP, ConfigError
from gomoku_ai.difficulty import (DIFFICULTY_MAP, MEDIUM_CANDIDATE_CAP, SearchConfig,
                                  get_search_config, load_search_configs)


class TestSearchConfig(unittest.TestCase):
    def test_depth_per_difficulty(self):
        self.assertEqual(get_search_config('easy').max_depth, 2)
        self.assertEqual(get_search_config('medium').max_depth, 4)
        self.assertEqual(get_search_config('hard').max_depth, 5)

    def test_only_hard_is_iterative(self):
        hard = get_search_config('hard')
        self.assertTrue(hard.iterative)
        self.assertEqual(hard.time_budget_ms, 3000)
        self.assertFalse(get_search_config('easy').iterative)
        self.assertFalse(get_search_config('medium').iterative)

    def test_lookup_is_case_insensitive(self):
        self.assertIs(get_search_config('HARD'), DIFFICULTY_MAP['hard'])
        self.assertIs(get_search_config('Easy'), DIFFICULTY_MAP['easy'])

    def test_unknown_falls_back_to_medium(self):
        self.assertIs(get_search_config('impossible'), DIFFICULTY_MAP['medium'])
        self.assertIs(get_search_config(''), DIFFICULTY_MAP['medium'])
        self.assertIs(get_search_config(None), DIFFICULTY_MAP['medium'])

    def test_defaults(self):
        config = SearchConfig('custom', max_depth=3)
        self.assertEqual(config.candidate_cap, CANDIDATE_CAP)
        self.assertEqual(config.search_radius, 4)
        self.assertIsNone(config.time_budget_ms)

    def test_is_frozen(self):
        config = get_search_config('easy')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.max_depth = 10

    def test_rejects_bad_values(self):
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=0)
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2, time_budget_ms=-1)
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2, candidate_cap=0)
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2, search_radius=0)

    def test_rejects_non_integers(self):
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2.5)
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=True)
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2, candidate_cap='10')
        with self.assertRaises(ConfigError):
            SearchConfig('bad', max_depth=2, time_budget_ms=1.5)

    def test_medium_keeps_fewer_candidates(self):
        self.assertEqual(get_search_config('medium').candidate_cap, MEDIUM_CANDIDATE_CAP)
        self.assertEqual(get_search_config('easy').candidate_cap, CANDIDATE_CAP)
        self.assertEqual(get_search_config('hard').candidate_cap, CANDIDATE_CAP)


class TestLoadSearchConfigs(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, text):
        path = os.path.join(self.tmpdir.name, 'presets.yaml')
        with open(path, 'w') as f:
            f.write(textwrap.dedent(text))
        return path

    def test_overrides_merge_with_defaults(self):
        path = self.write("""
            hard:
              time_budget_ms: 500
            Easy:
              max_depth: 1
              candidate_cap: 10
        """)
        configs = load_search_configs(path)

        self.assertEqual(configs['hard'].time_budget_ms, 500)
        self.assertEqual(configs['hard'].max_depth, 5)
        self.assertEqual(configs['easy'].max_depth, 1)
        self.assertEqual(configs['easy'].candidate_cap, 10)
        self.assertIs(configs['medium'], DIFFICULTY_MAP['medium'])
        # Defaults are untouched
        self.assertEqual(DIFFICULTY_MAP['hard'].time_budget_ms, 3000)

    def test_loaded_presets_feed_lookup(self):
        configs = load_search_configs(self.write("medium: {max_depth: 3}\n"))
        self.assertEqual(get_search_config('MEDIUM', configs).max_depth, 3)
        self.assertEqual(get_search_config('unknown', configs).max_depth, 3)

    def test_empty_file_gives_defaults(self):
        self.assertEqual(load_search_configs(self.write("")), DIFFICULTY_MAP)

    def test_unknown_difficulty(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("nightmare:\n  max_depth: 9\n"))

    def test_unknown_key(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("easy:\n  depth: 3\n"))

    def test_not_a_mapping(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("- easy\n- hard\n"))
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("easy: 3\n"))

    def test_invalid_value(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("medium:\n  max_depth: 0\n"))

    def test_fractional_depth(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("easy:\n  max_depth: 2.5\n"))

    def test_malformed_yaml(self):
        with self.assertRaises(ConfigError):
            load_search_configs(self.write("easy: [max_depth: 2\n"))


if __name__ == '__main__':
    unittest.main()
