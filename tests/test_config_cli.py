"""
配置加载、日志和命令行入口测试
"""

import io
import os
import subprocess
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from loguru import logger
from coordshift import wgs_to_gcj, gcj_to_wgs, gcj_to_bd, bd_to_gcj, gcj_to_wgs_exact, GeodeticSystem
from coordshift.main import main, run_conversion
from coordshift.utils.config_loader import ConfigLoader, load_config, merge_config, DEFAULT_CONVERT_CONFIG
from coordshift.utils.logger import setup_logger, setup_logger_from_config


PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = str(PROJECT_ROOT / 'config')


@pytest.fixture(autouse=True)
def restore_logger():
    """每个测试后恢复loguru默认输出"""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def custom_config_dir(tmp_path):
    """写入一份自定义配置"""
    (tmp_path / 'convert_config.yaml').write_text(
        "conversion:\n"
        "  source: gcj02\n"
        "  target: bd09\n"
        "  precision: 3\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding='utf-8'
    )
    return tmp_path


def parse_output(out):
    lat, lon = out.strip().split(',')
    return float(lat), float(lon)


class TestConfigLoader:
    """配置加载器测试"""

    def test_load_shipped_config(self):
        loader = ConfigLoader(CONFIG_DIR)
        config = loader.load('convert_config')

        assert config['conversion']['source'] == 'WGS84'
        assert config['conversion']['target'] == 'GCJ02'
        assert config['conversion']['exact']['epsilon'] == pytest.approx(1e-7)
        assert config['logging']['file'] is None

    def test_shipped_config_matches_defaults(self):
        config = ConfigLoader(CONFIG_DIR).load('convert_config')
        assert merge_config(DEFAULT_CONVERT_CONFIG, config) == DEFAULT_CONVERT_CONFIG

    def test_get_nested_key(self):
        loader = ConfigLoader(CONFIG_DIR)

        assert loader.get('convert_config', 'conversion.exact.max_rounds') == 10
        assert loader.get('convert_config', 'conversion.missing', 'x') == 'x'
        assert loader.get('convert_config', 'conversion.source.deeper') is None

    def test_cache_and_reload(self, custom_config_dir):
        loader = ConfigLoader(str(custom_config_dir))
        first = loader.load('convert_config')
        assert loader.load('convert_config') is first

        (custom_config_dir / 'convert_config.yaml').write_text("conversion:\n  precision: 8\n", encoding='utf-8')
        assert loader.load('convert_config')['conversion']['precision'] == 3
        assert loader.reload('convert_config')['conversion']['precision'] == 8

        loader.clear_cache()
        assert loader.load('convert_config') is not first

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(str(tmp_path)).load('convert_config')

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("conversion: [unclosed\n", encoding='utf-8')

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("", encoding='utf-8')

        assert load_config(str(path)) == {}

    def test_load_with_defaults_missing_file(self, tmp_path):
        config = ConfigLoader(str(tmp_path)).load_with_defaults('convert_config', DEFAULT_CONVERT_CONFIG)

        assert config == DEFAULT_CONVERT_CONFIG
        assert config is not DEFAULT_CONVERT_CONFIG

    def test_merge_config_nested(self):
        merged = merge_config(DEFAULT_CONVERT_CONFIG, {'conversion': {'exact': {'max_rounds': 3}}})

        assert merged['conversion']['exact']['max_rounds'] == 3
        assert merged['conversion']['exact']['epsilon'] == pytest.approx(1e-7)
        assert merged['conversion']['source'] == 'WGS84'
        assert DEFAULT_CONVERT_CONFIG['conversion']['exact']['max_rounds'] == 10


class TestLogger:
    """日志设置测试"""

    def test_setup_logger_level(self):
        buffer = io.StringIO()
        setup_logger(log_level='warning', sink=buffer)

        logger.info("不应输出")
        logger.warning("坐标转换告警")

        output = buffer.getvalue()
        assert "坐标转换告警" in output
        assert "不应输出" not in output

    def test_setup_logger_file(self, tmp_path):
        log_file = tmp_path / 'coordshift.log'
        setup_logger(log_level='DEBUG', log_file=str(log_file), sink=io.StringIO())

        logger.info("写入文件")
        logger.remove()

        assert "写入文件" in log_file.read_text(encoding='utf-8')

    def test_setup_from_config_override(self, tmp_path):
        log_file = tmp_path / 'override.log'
        setup_logger_from_config({'level': 'DEBUG', 'file': str(log_file)}, level_override='ERROR')

        logger.warning("被过滤")
        logger.error("保留")
        logger.remove()

        content = log_file.read_text(encoding='utf-8')
        assert "保留" in content
        assert "被过滤" not in content


class TestRunConversion:
    """单次转换测试"""

    def test_plain_dispatch(self):
        result = run_conversion(39.0, 116.0, GeodeticSystem.WGS84, GeodeticSystem.GCJ02)
        assert result == wgs_to_gcj(39.0, 116.0)

    def test_exact_from_gcj(self):
        result = run_conversion(39.0, 116.0, GeodeticSystem.GCJ02, GeodeticSystem.WGS84, exact_inverse=True)
        assert result == gcj_to_wgs_exact(39.0, 116.0)

    def test_exact_from_bd(self):
        result = run_conversion(39.0, 116.0, GeodeticSystem.BD09, GeodeticSystem.WGS84, exact_inverse=True)
        assert result == gcj_to_wgs_exact(*bd_to_gcj(39.0, 116.0))

    def test_exact_ignored_for_forward(self):
        result = run_conversion(39.0, 116.0, GeodeticSystem.GCJ02, GeodeticSystem.BD09, exact_inverse=True)
        assert result == gcj_to_bd(39.0, 116.0)


class TestMain:
    """命令行入口测试"""

    def test_default_conversion(self, capsys):
        assert main(['39.0', '116.0', '--config', CONFIG_DIR, '--precision', '4']) == 0

        out = capsys.readouterr().out
        assert out.strip() == '39.0009,116.0060'

    def test_exact_bd_to_wgs(self, capsys):
        main(['39.0', '116.0', '--from', 'baidu', '--to', 'gps', '--exact', '--config', CONFIG_DIR])

        lat, lon = parse_output(capsys.readouterr().out)
        expected = gcj_to_wgs_exact(*bd_to_gcj(39.0, 116.0))
        assert lat == pytest.approx(expected[0], abs=1e-6)
        assert lon == pytest.approx(expected[1], abs=1e-6)

    def test_config_defaults_used(self, capsys, custom_config_dir):
        main(['39.0', '116.0', '--config', str(custom_config_dir)])

        out = capsys.readouterr().out.strip()
        assert out == '39.006,116.007'

    def test_missing_config_dir_falls_back(self, capsys, tmp_path):
        main(['0', '0', '--config', str(tmp_path / 'nowhere')])

        assert capsys.readouterr().out.strip() == '0.000000,0.000000'

    def test_negative_coordinates(self, capsys):
        main(['-33.8688', '151.2093', '--config', CONFIG_DIR])

        assert capsys.readouterr().out.strip() == '-33.868800,151.209300'

    def test_unknown_system_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['39.0', '116.0', '--from', 'utm', '--config', CONFIG_DIR])

        assert excinfo.value.code == 2
        assert 'utm' in capsys.readouterr().err

    def test_negative_precision_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['39.0', '116.0', '--precision', '-1', '--config', CONFIG_DIR])

        assert excinfo.value.code == 2
        assert '--precision' in capsys.readouterr().err

    def test_unknown_log_level_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['39.0', '116.0', '--log-level', 'foo', '--config', CONFIG_DIR])

        assert excinfo.value.code == 2
        assert '--log-level' in capsys.readouterr().err

    def test_log_level_case_insensitive(self, capsys):
        assert main(['0', '0', '--log-level', 'warning', '--config', CONFIG_DIR]) == 0

    def test_bad_precision_in_config_exits(self, tmp_path):
        (tmp_path / 'convert_config.yaml').write_text("conversion:\n  precision: -2\n", encoding='utf-8')

        with pytest.raises(SystemExit) as excinfo:
            main(['39.0', '116.0', '--config', str(tmp_path)])

        assert excinfo.value.code == 2

    def test_no_exact_overrides_config(self, capsys, tmp_path):
        (tmp_path / 'convert_config.yaml').write_text(
            "conversion:\n"
            "  source: gcj02\n"
            "  target: wgs84\n"
            "  exact_inverse: true\n",
            encoding='utf-8'
        )

        main(['39.0', '116.0', '--config', str(tmp_path)])
        exact = parse_output(capsys.readouterr().out)
        main(['39.0', '116.0', '--no-exact', '--config', str(tmp_path)])
        first_order = parse_output(capsys.readouterr().out)

        assert exact == pytest.approx(gcj_to_wgs_exact(39.0, 116.0), abs=1e-6)
        assert first_order == pytest.approx(gcj_to_wgs(39.0, 116.0), abs=1e-6)
        assert exact != first_order


class TestCommandLineProcess:
    """以子进程方式运行命令行"""

    def run_cli(self, *args):
        env = dict(os.environ)
        env['PYTHONPATH'] = str(PROJECT_ROOT) + os.pathsep + env.get('PYTHONPATH', '')
        return subprocess.run(
            [sys.executable, '-m', 'coordshift.main', *args],
            cwd=str(PROJECT_ROOT),
            env=env,
            capture_output=True,
            text=True,
            encoding='utf-8',
            timeout=60
        )

    def test_default_level_has_no_debug_output(self):
        result = self.run_cli('39', '116', '--config', CONFIG_DIR, '--precision', '4')

        assert result.returncode == 0
        assert result.stdout.strip() == '39.0009,116.0060'
        assert 'DEBUG' not in result.stderr

    def test_debug_level_from_command_line(self):
        result = self.run_cli('39', '116', '--config', CONFIG_DIR, '--log-level', 'debug')

        assert result.returncode == 0
        assert 'DEBUG' in result.stderr
