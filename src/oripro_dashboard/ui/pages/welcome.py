"""
환영 페이지

로그인 직후의 기본 페이지이며 접근 확인 없이 항상 표시됩니다.
"""

import streamlit as st

from oripro_dashboard.menu import flatten_leaves
from oripro_dashboard.ui.navigation import node_label, select_navigation
from oripro_dashboard.ui.session_state import AppContext, navigate_to


def render_welcome_page(ctx: AppContext):
    """환영 페이지 렌더링"""
    user = ctx.session.user
    name = user.display_name if user else ''
    st.title(f"👋 Selamat Datang, {name}")
    st.write("Pilih menu di sidebar atau gunakan pintasan di bawah ini.")

    leaves = [node for node in flatten_leaves(select_navigation(ctx.menu_store.state)) if node.is_active]
    if not leaves:
        return

    columns = st.columns(3)
    for index, node in enumerate(leaves):
        with columns[index % 3]:
            if st.button(node_label(node), key=f"welcome_{node.id}", use_container_width=True):
                navigate_to(node.url)
