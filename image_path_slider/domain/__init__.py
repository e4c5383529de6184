"""이미지 경로 슬라이더 도메인 레이어.

외부 의존성 없이 곡선 보간/샘플링 로직과 값 객체를 정의한다.
"""
