"""이미지 경로 슬라이더 인프라 레이어 (포트 구현체)."""
