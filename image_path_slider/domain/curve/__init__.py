"""곡선 보간 알고리즘.

정규화(normalizer) → 제어점 계산(spline) → 평가(bezier, sampler)
→ SVG 경로 출력(svg_path) 순으로 사용한다.
"""
