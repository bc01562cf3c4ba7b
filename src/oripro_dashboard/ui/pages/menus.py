"""
메뉴 관리 페이지

사이드바 메뉴와 메뉴별 권한 플래그를 관리합니다.
변경 후에는 현재 세션의 메뉴 트리를 다시 불러옵니다.
"""

from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from oripro_dashboard.forms import MenuForm, validate_form
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.menu import Icon
from oripro_dashboard.ui.components import field_error, render_empty, select_index
from oripro_dashboard.ui.session_state import AppContext

logger = setup_logger('MenusPage')

CAPABILITY_LABELS = {
    'can_view': 'Lihat',
    'can_add': 'Tambah',
    'can_edit': 'Edit',
    'can_delete': 'Hapus',
    'can_confirm': 'Konfirmasi',
}


def flatten_menu_rows(raw_menus: list, depth: int = 0) -> List[dict]:
    """
    메뉴 트리를 들여쓰기된 행 목록으로 변환

    Args:
        raw_menus: API 메뉴 목록 (하위 메뉴는 'children')
        depth: 현재 깊이

    Returns:
        트리 순서의 행 딕셔너리 리스트 ('depth' 포함)
    """
    rows = []
    for menu in sorted(raw_menus or [], key=lambda m: m.get('order') or 0):
        rows.append({**menu, 'depth': depth})
        rows.extend(flatten_menu_rows(menu.get('children') or [], depth + 1))
    return rows


def save_menu(ctx: AppContext, values: dict, menu_id: Optional[str] = None) -> Tuple[bool, dict]:
    """
    메뉴 생성/수정 후 메뉴 트리 다시 불러오기

    Returns:
        (성공 여부, 필드별 오류)
    """
    form, errors = validate_form(MenuForm, values)
    if not form:
        return False, errors

    payload = form.to_payload()
    result = ctx.api.menus.create(payload) if menu_id is None else ctx.api.menus.update(menu_id, payload)
    if not result.success:
        ctx.notifier.api_error(result, "Gagal menyimpan menu")
        return False, {}

    logger.info(f"Menu saved: {form.title}")
    ctx.menu_store.reload()
    ctx.notifier.success("Menu berhasil disimpan")
    return True, {}


def delete_menu(ctx: AppContext, menu_id: str) -> bool:
    result = ctx.api.menus.delete(menu_id)
    if not result.success:
        ctx.notifier.api_error(result, "Gagal menghapus menu")
        return False

    logger.info(f"Menu deleted: {menu_id}")
    ctx.menu_store.reload()
    ctx.notifier.success("Menu berhasil dihapus")
    return True


def render_menus_page(ctx: AppContext):
    """메뉴 관리 페이지 렌더링"""
    st.title("⚙️ Manage Menus")

    with st.spinner("Memuat menu..."):
        result = ctx.api.menus.list()

    if not result.success:
        ctx.notifier.api_error(result, "Gagal memuat menu")
        render_empty("Menu tidak dapat dimuat.")
        return

    rows = flatten_menu_rows(result.items())

    tab1, tab2 = st.tabs(["📋 Daftar Menu", "➕ Tambah Menu"])

    with tab1:
        _render_menu_list(ctx, rows)

    with tab2:
        _render_menu_form(ctx, {}, None, key='menu_create')


def _render_menu_list(ctx: AppContext, rows: List[dict]):
    if not rows:
        render_empty("Belum ada menu.")
        return

    table = pd.DataFrame([{
        'Judul': ('　' * row['depth']) + str(row.get('title')),
        'URL': row.get('url') or '#',
        'Urutan': row.get('order'),
        'Aktif': bool(row.get('is_active', True)),
    } for row in rows])
    st.dataframe(table, use_container_width=True, hide_index=True)

    menus = {str(row['id']): row for row in rows if 'id' in row}
    if not menus:
        return

    selected = st.selectbox(
        "Pilih menu",
        options=list(menus.keys()),
        format_func=lambda menu_id: menus[menu_id].get('title') or menu_id,
        key='menu_selected'
    )

    with st.expander("✏️ Edit menu", expanded=False):
        _render_menu_form(ctx, menus[selected], selected, key=f"menu_edit_{selected}")

    if st.button("🗑️ Hapus menu", key=f"menu_delete_{selected}"):
        st.session_state.pending_delete = ('menus', selected)

    if st.session_state.get('pending_delete') == ('menus', selected):
        st.warning(f"Hapus menu '{menus[selected].get('title')}' beserta sub menunya?")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Ya, hapus", key='menu_confirm_delete', type="primary"):
                st.session_state.pending_delete = None
                delete_menu(ctx, selected)
                st.rerun()
        with col2:
            if st.button("Batal", key='menu_cancel_delete'):
                st.session_state.pending_delete = None
                st.rerun()


def _render_menu_form(ctx: AppContext, item: dict, menu_id: Optional[str], key: str):
    errors = st.session_state.form_errors.get(key, {})

    parents_result = ctx.api.menus.parents()
    parents = {
        str(menu['id']): menu.get('title') or str(menu['id'])
        for menu in (parents_result.items() if parents_result.success else [])
        if 'id' in menu and str(menu['id']) != str(menu_id)
    }
    parent_ids = [''] + list(parents.keys())
    icon_names = [icon.value for icon in Icon]

    with st.form(key):
        title = st.text_input("Judul *", value=item.get('title') or '')
        field_error(errors, 'title')

        col1, col2 = st.columns(2)
        with col1:
            url = st.text_input("URL", value=item.get('url') or '', placeholder="/asset atau # untuk grup")
            field_error(errors, 'url')
        with col2:
            icon = st.selectbox("Icon", options=icon_names, index=select_index(icon_names, item.get('icon')))

        col1, col2 = st.columns(2)
        with col1:
            parent_id = st.selectbox(
                "Parent",
                options=parent_ids,
                index=select_index(parent_ids, str(item.get('parent_id') or '')),
                format_func=lambda value: parents.get(value, '-')
            )
        with col2:
            order = st.number_input("Urutan", min_value=0, value=int(item.get('order') or 0))

        is_active = st.checkbox("Aktif", value=item.get('is_active', True))

        st.markdown("**Izin**")
        columns = st.columns(len(CAPABILITY_LABELS))
        flags = {}
        for column, (flag, label) in zip(columns, CAPABILITY_LABELS.items()):
            with column:
                flags[flag] = st.checkbox(label, value=bool(item.get(flag, flag == 'can_view')), key=f"{key}_{flag}")

        submitted = st.form_submit_button("💾 Simpan")

    if submitted:
        _, errors = save_menu(ctx, {
            'title': title,
            'url': url or None,
            'icon': icon,
            'parent_id': parent_id or None,
            'order': order,
            'is_active': is_active,
            **flags,
        }, menu_id)
        st.session_state.form_errors[key] = errors
        st.rerun()
