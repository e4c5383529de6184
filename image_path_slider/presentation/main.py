r"""이미지 경로 슬라이더 CLI 진입점.

실행: image_path_slider svg points.yaml
      image_path_slider sample points.yaml --progress 0 0.5 1
      image_path_slider simulate points.yaml --steps 20
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from image_path_slider.domain.entities.curve_path import CurvePath
from image_path_slider.domain.exceptions import DomainError
from image_path_slider.infra.codec.point_codec import load_points_file
from image_path_slider.infra.config.yaml_config_loader import YamlConfigLoader
from image_path_slider.infra.geometry.in_memory_geometry_provider import (
    InMemoryGeometryProvider,
)
from image_path_slider.infra.renderer.css_transform_renderer import (
    CssTransformRenderer,
)
from image_path_slider.infra.scheduler.manual_frame_scheduler import (
    ManualFrameScheduler,
)
from image_path_slider.usecase.edit_path import EditPath
from image_path_slider.usecase.ports.config_port import SliderConfig
from image_path_slider.usecase.slide_image import SlideImage

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='image_path_slider',
        description='Scroll-driven image path slider tools',
    )
    parser.add_argument(
        '-c', '--config_file', type=Path, default=None,
        help='Path to the slider config YAML file',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    svg = sub.add_parser('svg', help='Print the SVG preview path')
    svg.add_argument('points_file', type=Path)
    svg.add_argument('--scale-x', type=float, default=None)
    svg.add_argument('--scale-y', type=float, default=None)

    sample = sub.add_parser('sample', help='Sample x ratio at progress')
    sample.add_argument('points_file', type=Path)
    sample.add_argument(
        '-p', '--progress', type=float, nargs='+', required=True,
    )

    simulate = sub.add_parser(
        'simulate', help='Scroll an in-memory page and print transforms',
    )
    simulate.add_argument('points_file', type=Path)
    simulate.add_argument('--width', type=float, default=1200.0)
    simulate.add_argument('--height', type=float, default=3000.0)
    simulate.add_argument('--viewport-width', type=float, default=1280.0)
    simulate.add_argument('--viewport-height', type=float, default=800.0)
    simulate.add_argument('--steps', type=int, default=10)
    return parser


def _run_svg(args: argparse.Namespace, config: SliderConfig) -> None:
    editor = EditPath(load_points_file(args.points_file), config.path)
    if args.scale_x is None and args.scale_y is None:
        print(editor.preview_svg())
        return
    print(editor.curve.svg_path(
        args.scale_x if args.scale_x is not None else config.path.svg_scale_x,
        args.scale_y if args.scale_y is not None else config.path.svg_scale_y,
    ))


def _run_sample(args: argparse.Namespace, config: SliderConfig) -> None:
    curve = CurvePath(
        load_points_file(args.points_file), config.path.edge_tolerance
    )
    for progress in args.progress:
        print(f'{progress:g}\t{curve.sample_x(progress):.6f}')


def _run_simulate(args: argparse.Namespace, config: SliderConfig) -> None:
    curve = CurvePath(
        load_points_file(args.points_file), config.path.edge_tolerance
    )
    # 이미지 위아래로 뷰포트 높이만큼 여백이 있는 페이지
    geometry = InMemoryGeometryProvider(
        element_offset_top=args.viewport_height,
        element_height=args.height,
        element_width=args.width,
        scroll_height=args.height + 2 * args.viewport_height,
        viewport_width=args.viewport_width,
        viewport_height=args.viewport_height,
    )
    scheduler = ManualFrameScheduler()
    renderer = CssTransformRenderer()
    slider = SlideImage(
        curve, geometry, scheduler, renderer, config.animation,
    )

    slider.start()
    steps = max(1, args.steps)
    for step in range(steps + 1):
        geometry.scroll_to(geometry.max_scroll_top * step / steps)
        slider.on_scroll()
        frames = scheduler.run_until_idle()
        print(
            f'{step}\tscroll={geometry.get_geometry().scroll_top:.1f}'
            f'\tframes={frames}\t{renderer.last_transform}'
        )
    slider.stop()


_COMMANDS = {
    'svg': _run_svg,
    'sample': _run_sample,
    'simulate': _run_simulate,
}


def main(argv: list[str] | None = None) -> int:
    """CLI를 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = YamlConfigLoader(args.config_file).load()
        _COMMANDS[args.command](args, config)
    except (DomainError, OSError) as e:
        logger.error('%s failed: %s', args.command, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
