"""
빈 상태 / 찾을 수 없음 화면
"""

from typing import Optional

import streamlit as st

from oripro_dashboard.ui.session_state import HOME_PATH, navigate_to


def render_not_found(title: str, detail: Optional[str] = None, back_path: str = HOME_PATH,
                     back_label: str = "Kembali"):
    """
    찾을 수 없음 화면 렌더링

    Args:
        title: 제목 (예: 'Asset tidak ditemukan')
        detail: 추가 설명 (요청 경로 등)
        back_path: 돌아갈 경로
        back_label: 버튼 이름
    """
    st.subheader(f"🔍 {title}")
    if detail:
        st.caption(detail)
    if st.button(f"← {back_label}", key=f"not_found_back_{back_path}"):
        navigate_to(back_path)


def render_empty(message: str):
    """데이터 없음 안내"""
    st.info(message)
