"""
라우트 가드

페이지를 렌더링하기 전에 접근 판정을 수행합니다.
판정 중에는 스피너, 거부되면 '접근 거부' 화면, 허용되면 페이지를 표시합니다.
"""

from typing import Callable

import streamlit as st

from oripro_dashboard.access import AccessDecision, AccessState, RouteAccessGate


def render_access_denied():
    """접근 거부 화면"""
    st.markdown("## 🚫 Akses Ditolak")
    st.write("Anda tidak memiliki izin untuk mengakses halaman ini.")


def render_route_guard(gate: RouteAccessGate, path: str, render_page: Callable[[], object]) -> AccessDecision:
    """
    접근 판정 후 페이지 렌더링

    Args:
        gate: 라우트 접근 게이트
        path: 현재 경로
        render_page: 허용 시 호출할 렌더링 함수

    Returns:
        최종 AccessDecision
    """
    decision = gate.current_decision(path)
    if decision.state == AccessState.CHECKING:
        with st.spinner("Memeriksa akses..."):
            decision = gate.evaluate(path)

    if decision.state == AccessState.DENIED:
        render_access_denied()
        return decision

    render_page()
    return decision
