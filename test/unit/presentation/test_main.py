"""CLI 진입점 단위 테스트."""

import pytest
import yaml

from image_path_slider.presentation.main import main


@pytest.fixture
def points_file(tmp_path):
    path = tmp_path / 'points.yaml'
    with open(path, 'w') as f:
        yaml.dump(
            [
                {'x': 0.8, 'y': 0.5},
                {'x': 0.2, 'y': 0.0},
                {'x': 0.3, 'y': 1.0},
            ],
            f,
        )
    return str(path)


class TestSvgCommand:
    def test_prints_preview(self, points_file, capsys):
        assert main(['svg', points_file]) == 0
        out = capsys.readouterr().out.strip()
        assert out.startswith('M 20 0 C ')
        assert out.endswith(' 30 100')

    def test_custom_scale(self, points_file, capsys):
        assert main(['svg', points_file, '--scale-x', '10']) == 0
        out = capsys.readouterr().out.strip()
        assert out.startswith('M 2 0 C ')
        assert out.endswith(' 3 100')


class TestSampleCommand:
    def test_prints_ratios(self, points_file, capsys):
        assert main(['sample', points_file, '-p', '0', '0.25', '1']) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == [
            '0\t0.200000',
            '0.25\t0.603125',
            '1\t0.300000',
        ]


class TestSimulateCommand:
    def test_prints_one_line_per_step(self, points_file, capsys):
        assert main(['simulate', points_file, '--steps', '4']) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 5
        assert all('translateX(' in line for line in lines)
        # 마지막 위치: 뷰포트 중앙 640 - 0.3 * 1200 = 280 (1px 이내 수렴)
        offset = float(lines[-1].rsplit('translateX(', 1)[1][:-3])
        assert offset == pytest.approx(280.0, abs=1.0)


class TestErrors:
    def test_missing_points_file(self, tmp_path):
        assert main(['svg', str(tmp_path / 'missing.yaml')]) == 1

    def test_invalid_points(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('- {x: 0.1}\n', encoding='utf-8')
        assert main(['sample', str(path), '-p', '0.5']) == 1

    def test_invalid_config(self, tmp_path, points_file):
        config = tmp_path / 'config.yaml'
        config.write_text('animation: {damping: 0}\n', encoding='utf-8')
        assert main(['-c', str(config), 'svg', points_file]) == 1

    def test_malformed_points_file(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('- {x: 0.1, y: [', encoding='utf-8')
        assert main(['sample', str(path), '-p', '0.5']) == 1
