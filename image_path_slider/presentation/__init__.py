"""이미지 경로 슬라이더 프레젠테이션 레이어 (CLI)."""
