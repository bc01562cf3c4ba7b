"""
브레드크럼 네비게이션 컴포넌트

현재 페이지의 경로를 시각적으로 표시합니다.
"""

import html
from typing import Iterable, List, Tuple

import streamlit as st

from oripro_dashboard.menu import MenuNode, menu_titles_by_url

# 메뉴 트리에 없는 경로 세그먼트 이름
SEGMENT_NAMES = {
    'create': 'Tambah',
    'edit': 'Edit',
    'view': 'Detail',
    'payment': 'Pembayaran',
    'view-profile': 'Profil',
    'welcome': 'Selamat Datang',
    'auth': 'Auth',
}


def build_breadcrumb(current_path: str, tree: Iterable[MenuNode]) -> List[Tuple[str, str]]:
    """
    브레드크럼 항목 계산

    메뉴 트리에 있는 경로는 메뉴 제목을, 나머지는 세그먼트 이름을 사용합니다.
    ID 세그먼트('/users/edit/12'의 '12')는 표시하지 않습니다.

    Args:
        current_path: 현재 페이지 경로 (예: '/users/edit/12')
        tree: 메뉴 트리

    Returns:
        (누적 경로, 표시 이름) 리스트
    """
    titles = menu_titles_by_url(tree)
    parts = [p for p in current_path.split('/') if p]

    crumbs = []
    accumulated_path = ''
    for index, part in enumerate(parts):
        accumulated_path += f'/{part}'
        # 'edit', 'view', 'payment' 뒤에 오는 ID
        if index > 0 and parts[index - 1] in ('edit', 'view', 'payment', 'view-profile'):
            continue
        name = titles.get(accumulated_path) or SEGMENT_NAMES.get(part) or part.replace('-', ' ').title()
        crumbs.append((accumulated_path, name))
    return crumbs


def render_breadcrumb(current_path: str, tree: Iterable[MenuNode]):
    """
    브레드크럼 네비게이션 렌더링

    Args:
        current_path: 현재 페이지 경로
        tree: 메뉴 트리
    """
    crumbs = build_breadcrumb(current_path, tree)
    if not crumbs:
        return

    # 브레드크럼 HTML 생성
    breadcrumb_html = '<div style="padding: 10px 0; font-size: 14px;">'
    breadcrumb_html += '<span style="color: #888;">📍 </span>'
    breadcrumb_html += '<span style="color: #888;">Home</span>'

    separator = ' <span style="color: #888;">›</span> '
    for i, (_, name) in enumerate(crumbs):
        name = html.escape(name)
        # 마지막 항목은 굵게 표시
        if i == len(crumbs) - 1:
            breadcrumb_html += f'{separator}<strong>{name}</strong>'
        else:
            breadcrumb_html += f'{separator}{name}'

    breadcrumb_html += '</div>'

    st.markdown(breadcrumb_html, unsafe_allow_html=True)


def get_page_title(path: str, tree: Iterable[MenuNode]) -> str:
    """
    경로에서 페이지 제목 추출

    Args:
        path: 페이지 경로
        tree: 메뉴 트리

    Returns:
        페이지 제목
    """
    crumbs = build_breadcrumb(path, tree)
    return crumbs[-1][1] if crumbs else 'Oripro'
