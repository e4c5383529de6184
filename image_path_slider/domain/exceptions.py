"""이미지 경로 슬라이더 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InsufficientKnotsError(DomainError):
    """스플라인 계산에 필요한 매듭점(2개 이상)이 부족할 때."""


class InvalidPointError(DomainError):
    """호스트 속성 값을 Point로 해석할 수 없을 때."""


class PointIndexError(DomainError):
    """존재하지 않는 인덱스의 점을 제거하려 할 때."""


class ConfigError(DomainError):
    """설정 값이 유효 범위를 벗어났을 때."""
