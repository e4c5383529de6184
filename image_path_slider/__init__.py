"""스크롤 기반 이미지 경로 슬라이더.

작성자가 찍은 점들을 3차 베지어 스플라인으로 보간하고,
스크롤 진행률에 따라 이미지의 가로 위치를 계산한다.
"""

__version__ = '0.1.0'
