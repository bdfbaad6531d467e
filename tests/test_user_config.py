"""
Tests for user configuration loading.
"""

import json

from pixelprint.config import DEFAULT_ALGORITHM, DEFAULT_PRECISION, DEFAULT_RESAMPLE
from pixelprint.user_config import get_user_config


def _write_config(config_dir, data):
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / 'config.json').write_text(json.dumps(data), encoding='utf-8')
    get_user_config().reload()


class TestUserConfig:
    """Test UserConfig priority order."""

    def test_defaults(self):
        config = get_user_config()
        assert config.default_algorithm == DEFAULT_ALGORITHM
        assert config.default_precision == DEFAULT_PRECISION
        assert config.resample == DEFAULT_RESAMPLE

    def test_singleton(self):
        assert get_user_config() is get_user_config()

    def test_config_file(self, isolated_user_config):
        _write_config(isolated_user_config, {'default_precision': 16, 'resample': 'bicubic'})
        config = get_user_config()
        assert config.default_precision == 16
        assert config.resample == 'bicubic'

    def test_env_overrides_file(self, isolated_user_config, monkeypatch):
        _write_config(isolated_user_config, {'default_algorithm': 'ahash'})
        monkeypatch.setenv('PIXELPRINT_ALGORITHM', 'phash')
        assert get_user_config().default_algorithm == 'phash'

    def test_env_numbers_parsed(self, monkeypatch):
        monkeypatch.setenv('PIXELPRINT_WORKERS', '12')
        monkeypatch.setenv('PIXELPRINT_SIMILARITY_RATIO', '0.25')
        config = get_user_config()
        assert config.default_workers == 12
        assert config.similarity_ratio == 0.25

    def test_broken_file_falls_back(self, isolated_user_config):
        isolated_user_config.mkdir(parents=True, exist_ok=True)
        (isolated_user_config / 'config.json').write_text("{not json", encoding='utf-8')
        get_user_config().reload()
        assert get_user_config().default_precision == DEFAULT_PRECISION

    def test_create_example_config(self, isolated_user_config):
        config = get_user_config()
        assert config.create_example_config()
        data = json.loads(config.config_file_path.read_text(encoding='utf-8'))
        assert data['default_algorithm'] == DEFAULT_ALGORITHM
        assert data['resample'] == DEFAULT_RESAMPLE
