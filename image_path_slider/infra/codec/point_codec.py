"""점 목록 직렬화/역직렬화.

호스트 디자인 툴은 경로를 [{'x': .., 'y': ..}, ...] 형태의
속성 값으로 저장한다. 이 형식과 도메인 Point 사이의 변환은
이 모듈에서만 처리한다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
import math
from pathlib import Path
from typing import Any

import yaml

from image_path_slider.domain.exceptions import InvalidPointError
from image_path_slider.domain.value_objects.point import Point

logger = logging.getLogger(__name__)


def decode_points(raw: Iterable[Any] | None) -> list[Point]:
    """호스트 속성 값을 Point 목록으로 변환한다.

    None은 빈 목록으로 취급한다. 입력 순서는 유지한다.

    Args:
        raw: {'x', 'y'} 매핑 또는 (x, y) 쌍의 목록.

    Returns:
        Point 목록.

    Raises:
        InvalidPointError: 항목을 점으로 해석할 수 없을 때.
    """
    if raw is None:
        return []
    if isinstance(raw, (str, bytes, Mapping)):
        raise InvalidPointError(
            f'Point list must be a sequence, got {type(raw).__name__}'
        )
    return [_decode_point(i, item) for i, item in enumerate(raw)]


def encode_points(points: Iterable[Point]) -> list[dict[str, float]]:
    """Point 목록을 호스트 속성 값 형식으로 변환한다."""
    return [p.as_dict() for p in points]


def load_points_file(path: str | Path) -> list[Point]:
    """YAML/JSON 파일에서 점 목록을 읽는다.

    파일은 점 목록 자체이거나 'points' 키 아래에 목록을 가진다.
    JSON은 YAML의 부분집합이므로 같은 파서로 읽는다.

    Args:
        path: 점 파일 경로.

    Returns:
        Point 목록.

    Raises:
        InvalidPointError: 파일 내용을 해석할 수 없을 때.
    """
    with open(path, encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidPointError(
                f'Points file {path} is not valid YAML/JSON: {e}'
            ) from e

    if isinstance(data, dict):
        data = data.get('points')

    points = decode_points(data)
    logger.info('Loaded %d point(s) from %s', len(points), path)
    return points


def _decode_point(index: int, item: Any) -> Point:
    if isinstance(item, Mapping):
        try:
            x, y = item['x'], item['y']
        except KeyError as e:
            raise InvalidPointError(
                f'Point #{index} is missing key {e.args[0]!r}'
            ) from e
    elif isinstance(item, (list, tuple)) and len(item) == 2:
        x, y = item
    else:
        raise InvalidPointError(f'Point #{index} has invalid shape: {item!r}')

    try:
        point = Point(x=float(x), y=float(y))
    except (TypeError, ValueError) as e:
        raise InvalidPointError(
            f'Point #{index} has non-numeric coordinates: {item!r}'
        ) from e

    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise InvalidPointError(
            f'Point #{index} has non-finite coordinates: {item!r}'
        )
    return point
